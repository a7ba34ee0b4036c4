"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdimport.cli.commands import domain_cmd, import_cmd, init_cmd, list_cmd, main_callback, show_cmd


app = typer.Typer(name="mdimport", no_args_is_help=True, help="Import TOML-frontmatter markdown folders into a document store")

app.callback()(main_callback)
app.command(name="init")(init_cmd)
app.command(name="import")(import_cmd)
app.command(name="domain")(domain_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
