from collections.abc import Callable

import typer

from sara_forms.application.dtos.mask_dtos import MaskRequestDTO
from sara_forms.application.use_cases.mask_field_input import MaskFieldInputUseCase
from sara_forms.config import settings
from sara_forms.domain.validation import (
    format_cpf,
    is_required,
    is_valid_cpf,
    is_valid_email,
    is_valid_password,
)
from sara_forms.domain.value_objects.field_kind import FieldKind
from sara_forms.logging_config import configure_logging

app = typer.Typer(help="SARA form validation and input masking CLI")


@app.callback()
def main() -> None:
    configure_logging(settings.log_level)


def _report(predicate: Callable[[object], bool], text: str) -> None:
    ok = predicate(text)
    typer.echo("válido" if ok else "inválido")
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def cpf(text: str) -> None:
    """Valida um CPF pelos dígitos verificadores."""
    _report(is_valid_cpf, text)


@app.command()
def email(text: str) -> None:
    _report(is_valid_email, text)


@app.command()
def password(text: str) -> None:
    _report(is_valid_password, text)


@app.command()
def required(text: str) -> None:
    _report(is_required, text)


@app.command("format-cpf")
def format_cpf_cmd(text: str) -> None:
    typer.echo(format_cpf(text))


@app.command()
def mask(
    kind: FieldKind,
    text: str,
    previous: str = typer.Option("", "--previous", "-p"),
) -> None:
    """Aplica a máscara do campo ao texto digitado até agora."""
    result = MaskFieldInputUseCase().execute(MaskRequestDTO(kind=kind, value=text, previous=previous))
    typer.echo(result.value)


if __name__ == "__main__":
    app()
