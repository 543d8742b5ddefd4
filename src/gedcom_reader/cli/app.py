from __future__ import annotations

import typer

from gedcom_reader.cli.commands.export import export_command
from gedcom_reader.cli.commands.records import records_command
from gedcom_reader.cli.commands.stats import stats_command
from gedcom_reader.config import get_config
from gedcom_reader.options import DecodeOptions

app = typer.Typer(
    name="gedcom-reader",
    help="GEDCOM record decoder, inspector, and exporter",
    add_completion=False,
)


@app.callback()
def configure(
    ctx: typer.Context,
    lenient: bool = typer.Option(False, "--lenient", help="Turn on every leniency option"),
    allow_unknown_tags: bool = typer.Option(False, "--allow-unknown-tags"),
    allow_wrong_length: bool = typer.Option(False, "--allow-wrong-length"),
    allow_missing_required: bool = typer.Option(False, "--allow-missing-required"),
    allow_more_than_allowed: bool = typer.Option(False, "--allow-more-than-allowed"),
    ignore_invalid_value: bool = typer.Option(False, "--ignore-invalid-value"),
    allow_unknown_charset: bool = typer.Option(False, "--allow-unknown-charset"),
    allow_terminators_in_value: bool = typer.Option(False, "--allow-terminators-in-value"),
):
    """
    Leniency flags apply to every command.

    Options start from ``decoder.options`` in the config file; a flag can
    only switch an option on.
    """
    if lenient:
        options = DecodeOptions.lenient()
    else:
        flags = {
            "allow_unknown_tags": allow_unknown_tags,
            "allow_wrong_length": allow_wrong_length,
            "allow_missing_required": allow_missing_required,
            "allow_more_than_allowed": allow_more_than_allowed,
            "ignore_invalid_value": ignore_invalid_value,
            "allow_unknown_charset": allow_unknown_charset,
            "allow_terminators_in_value": allow_terminators_in_value,
        }
        options = DecodeOptions.from_config(get_config()).with_changes(
            **{name: True for name, on in flags.items() if on}
        )
    ctx.obj = {"options": options}


app.command("records")(records_command)
app.command("stats")(stats_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
