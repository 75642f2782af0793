from kvconf.cli.app import app

app(prog_name="kvconf")
