from compose_executor.cli import cli

if __name__ == "__main__":
    cli()
