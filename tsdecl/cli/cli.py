from pathlib import Path
import click

from datetime import date
from rich import pretty
from rich.console import Console

from tsdecl.api.errors import GenerationError
from tsdecl.api.gen_logging import configure_gen_logging
from tsdecl.api.generator import render_model_declarations
from tsdecl.language import build_model, DEFAULT_SCHEMA
from tsdecl.utils import print_model_debug

pretty.install()
# Status lines go to stderr; stdout carries the generated declarations
console = Console(stderr=True)


def _stamp() -> str:
    return date.today().strftime('%Y-%m-%d')


@click.group()
@click.pass_context
def cli(context):
    context.ensure_object(dict)


@cli.command("validate", help="Schema Validation")
@click.pass_context
@click.argument("model_path")
def validate(context, model_path):
    try:
        _ = build_model(model_path)
        console.print(f"[{_stamp()}] Schema validation success!", style='green')
    except Exception as e:
        console.print(f"[{_stamp()}] Validation failed with error(s): {e}", style='red')
        context.exit(1)
    else:
        context.exit(0)


@cli.command("inspect", help="Parse and print a summary of the schema (structs, fields, export order).")
@click.pass_context
@click.argument("model_path")
def inspect_cmd(context, model_path):
    try:
        model = build_model(model_path)
        console.print(f"[{_stamp()}] Schema validation success!", style='green')
        print_model_debug(model)
    except Exception as e:
        console.print(f"[{_stamp()}] Inspect failed with error(s): {e}", style='red')
        context.exit(1)
    else:
        context.exit(0)


@cli.command("generate", help="Emit TypeScript declarations for the schema's export list.")
@click.pass_context
@click.argument("model_path", required=False, default=DEFAULT_SCHEMA)
@click.option("--out", "out_file", default=None, help="Output file (default: stdout)")
@click.option("--verbose", "-v", is_flag=True, help="Log every struct and skipped field.")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors.")
def generate(context, model_path, out_file, verbose, quiet):
    configure_gen_logging(verbose=verbose, quiet=quiet)
    try:
        model = build_model(model_path)
        if out_file:
            out_path = Path(out_file).resolve()
            out_path.parent.mkdir(parents=True, exist_ok=True)
            with out_path.open("w", encoding="utf-8", newline="\n") as out:
                render_model_declarations(model, out=out)
            console.print(f"[{_stamp()}] Declarations emitted to: {out_path}", style="green")
        else:
            render_model_declarations(model)
    except GenerationError as e:
        console.print(f"[{_stamp()}] Generate failed with error(s): {e}", style="red")
        context.exit(1)
    except Exception as e:
        import traceback

        console.print(f"[{_stamp()}] Generate failed with error(s): {e}", style="red")
        tb_lines = traceback.format_exc().splitlines()
        console.print("\n".join(tb_lines[-50:]), style="red")
        context.exit(1)
    else:
        context.exit(0)


if __name__ == "__main__":
    cli()
