from mobius.cli import app

app(prog_name="mobius-viz")
