# src/rucky/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from .. import __version__
from ..config import config
from ..lexer import Lexer
from ..parser import Parser
from ..rucky_ast import Node
from ..rucky_token import EOF

console = Console()


def _read_source(file):
    with open(file, "r", encoding="utf-8") as f:
        return f.read()


def _print_errors(errors, title):
    console.print(f"[bold red]{title}[/bold red]")
    for error in errors:
        console.print(f"  {error}", markup=False)


def _build_tree(node, tree):
    """Add ``node``'s children under ``tree``, one branch per node field."""
    pending = [(node, tree)]
    while pending:
        node, tree = pending.pop()
        for field, value in vars(node).items():
            if isinstance(value, Node):
                branch = tree.add(f"[cyan]{field}[/cyan]: {type(value).__name__}")
                pending.append((value, branch))
            elif isinstance(value, list):
                branch = tree.add(f"[cyan]{field}[/cyan]")
                for item in value:
                    pending.append((item, branch.add(type(item).__name__)))
            else:
                tree.add(f"[cyan]{field}[/cyan]: [green]{escape(repr(value))}[/green]")


def _restore_config(enable_debug_logs, log_level):
    config.enable_debug_logs = enable_debug_logs
    config.log_level = log_level


@click.group()
@click.version_option(version=__version__, prog_name="Rucky")
@click.option("--debug", is_flag=True, help="Enable parser debug logging.")
@click.pass_context
def cli(ctx, debug):
    """Rucky language front end - tokenize and parse source files"""
    if debug:
        previous = (config.enable_debug_logs, config.log_level)
        config.enable_debug_logs = True
        config.log_level = "verbose"
        ctx.call_on_close(lambda: _restore_config(*previous))
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check syntax of a Rucky file"""
    parser = Parser(Lexer(_read_source(file), filename=file))
    program = parser.parse_program()

    if parser.errors:
        _print_errors(parser.errors, "Syntax Errors Found:")
        sys.exit(1)

    console.print(f"[bold green]Syntax is valid![/bold green] ({len(program.statements)} statements)")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show AST of a Rucky file"""
    parser = Parser(Lexer(_read_source(file), filename=file))
    program = parser.parse_program()

    if parser.errors:
        _print_errors(parser.errors, "Parser Errors:")
        sys.exit(1)

    console.print(Panel.fit(
        Text(str(program) or "(empty program)"),
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue",
    ))

    tree = Tree("[bold]Program[/bold]")
    _build_tree(program, tree)
    console.print(tree)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Rucky file"""
    lexer = Lexer(_read_source(file), filename=file)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in lexer:
        if token.type == EOF:
            break
        table.add_row(token.type, Text(token.literal), str(token.line), str(token.column))

    console.print(table)


if __name__ == "__main__":
    cli()
