"""mobius-viz — командная строка для generate_mobius_transformation.

Команды:
    mobius-viz transform REQUEST.json   # или "-" для stdin
    mobius-viz families

Коды выхода transform:
    0 — кривые вычислены
    1 — преобразование не существует ({"kind": "DoesNotExist"})
    2 — некорректный запрос
    3 — результат не представим в JSON (NaN/Inf после переполнения)
"""

import json
import logging
import sys
from pathlib import Path

import typer

from mobius.api.dispatch import handle_request
from mobius.core.exceptions import InvalidRequestError, InvalidValueError
from mobius.data.curve_families import CURVE_FAMILIES

app = typer.Typer(
    help="Möbius transformations from three point correspondences.",
    no_args_is_help=True,
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("mobius")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Включить DEBUG логирование"),
) -> None:
    _configure_logging(verbose)


@app.command()
def transform(
    request_file: str = typer.Argument(
        ..., help="JSON документ запроса ('-' для чтения из stdin)", metavar="REQUEST"
    ),
) -> None:
    """Вычислить преобразованные семейства кривых для запроса."""
    if request_file == "-":
        payload = sys.stdin.read()
    else:
        path = Path(request_file)
        if not path.is_file():
            typer.echo(f"request file not found: {path}", err=True)
            raise typer.Exit(code=2)
        payload = path.read_text(encoding="utf-8")

    try:
        result = handle_request(payload)
    except InvalidRequestError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    except InvalidValueError as exc:
        typer.echo(f"cannot encode result: {exc}", err=True)
        raise typer.Exit(code=3) from exc

    typer.echo(json.dumps(result))
    if "kind" in result:
        raise typer.Exit(code=1)


@app.command()
def families() -> None:
    """Показать доступные семейства кривых."""
    for name, family in CURVE_FAMILIES.items():
        typer.echo(f"{name}\t{len(family)}")
