# /setup.py
"""
Setup configuration for compose-executor.
"""
from setuptools import setup, find_packages
from pathlib import Path

# Read version from compose_executor/__init__.py
with open('compose_executor/__init__.py', 'r') as f:
    for line in f:
        if line.startswith('__version__'):
            version = line.split('=')[1].strip().strip('"\'')
            break

# Read README
readme = Path(__file__).parent / 'README.md'
long_description = readme.read_text() if readme.exists() else ''

setup(
    name='compose-executor',
    version=version,
    description='Start, stop and restart service containers and verify the result',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(include=['compose_executor', 'compose_executor.*']),
    python_requires='>=3.8',
    install_requires=[
        'click>=8.1.7',
        'rich>=13.7.0',
        'pyyaml>=6.0.1',
        'python-dotenv>=1.0.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.4.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'compose-executor=compose_executor.cli:cli'
        ]
    },
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: System Administrators',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Systems Administration',
    ],
    keywords='container management, docker, service control',
    zip_safe=False,
)
