"""CLI entrypoint: Typer app definition and command registration"""

import typer

from doc2quarto.cli.commands import convert_cmd, preview_cmd


app = typer.Typer(name="doc2quarto", no_args_is_help=True, help="Convert Docusaurus markdown docs to Quarto")

app.command(name="convert")(convert_cmd)
app.command(name="preview")(preview_cmd)
