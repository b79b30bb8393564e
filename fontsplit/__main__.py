from fontsplit.cli.main import cli

cli()
