"""Command-line interface for crosspath."""
import json
import sys
import logging
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

import click
from . import __version__
from .core.models import Config, GrammarKind
from .grammars import PathGrammar, get_grammar
from .utils.console import ConsoleManager, THEMES


# operation name -> (number of paths, or None for any, handler)
OPERATIONS: Dict[str, Tuple[Optional[int], Callable[[PathGrammar, Sequence[str]], Any]]] = {
    'clean': (1, lambda g, p: g.clean(p[0])),
    'dirname': (1, lambda g, p: g.dirname(p[0])),
    'basename': (1, lambda g, p: g.basename(p[0])),
    'split': (1, lambda g, p: g.split(p[0])),
    'join': (None, lambda g, p: g.join(p)),
    'is-absolute': (1, lambda g, p: g.is_absolute(p[0])),
    'is-rooted': (1, lambda g, p: g.is_rooted(p[0])),
    'is-relative': (1, lambda g, p: g.is_relative(p[0])),
    'is-local': (1, lambda g, p: g.is_local(p[0])),
    'volume': (1, lambda g, p: g.volume_name(p[0])),
    'ext': (1, lambda g, p: g.extension(p[0])),
    'to-slash': (1, lambda g, p: g.to_slash(p[0])),
    'from-slash': (1, lambda g, p: g.from_slash(p[0])),
    'split-list': (1, lambda g, p: g.split_list(p[0])),
    'abs': (1, lambda g, p: g.to_absolute(p[0])),
    'rel': (2, lambda g, p: g.to_relative(p[0], p[1])),
}


def setup_logging(debug: bool, level_name: str = "WARNING") -> None:
    """Configure logging based on debug flag and configured level."""
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.WARNING)
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def run_operation(grammar: PathGrammar, operation: str, paths: Sequence[str]) -> Any:
    """
    Apply a named operation to its path arguments.

    Args:
        grammar: Grammar to evaluate the operation in
        operation: Key of OPERATIONS
        paths: Path arguments

    Returns:
        The operation's result (str, bool or list of str)

    Raises:
        click.UsageError: If the number of paths does not fit the operation
    """
    arity, handler = OPERATIONS[operation]
    if arity is not None and len(paths) != arity:
        noun = "path" if arity == 1 else "paths"
        raise click.UsageError(f"'{operation}' takes {arity} {noun}, got {len(paths)}")
    return handler(grammar, list(paths))


@click.command()
@click.argument('operation', type=click.Choice(sorted(OPERATIONS)))
@click.argument('paths', nargs=-1)
@click.option('--grammar', '-g', type=click.Choice([kind.value for kind in GrammarKind]),
              help='Path grammar (default: CROSSPATH_GRAMMAR or the running platform)')
@click.option('--json', 'export_json', is_flag=True, help='Print the result as JSON')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default='manhattan',
              help='Terminal color theme')
@click.option('--debug', is_flag=True, help='Enable debug logging and tracebacks')
@click.version_option(version=__version__)
def main(operation: str, paths: Tuple[str, ...], grammar: Optional[str],
         export_json: bool, theme: str, debug: bool) -> None:
    """
    Apply a lexical path OPERATION to one or more PATHS.

    Examples:

        crosspath clean /foo/../bar/

        crosspath -g windows dirname 'c:/foo'

        crosspath -g windows join 'c:' foo bar

        crosspath --json split /usr/local/bin
    """
    console = ConsoleManager(theme=theme)

    try:
        config = Config(grammar=grammar) if grammar else Config()
        setup_logging(debug, config.log_level)

        path_grammar = get_grammar(config)
        result = run_operation(path_grammar, operation, paths)

        if export_json:
            click.echo(json.dumps({
                'grammar': path_grammar.kind.value,
                'operation': operation,
                'input': list(paths),
                'result': result,
            }, indent=2))
        else:
            console.print_value(result)

    except ValueError as e:
        console.print_error(f"> ERROR: {e}")
        if debug:
            console.print_exception()
        sys.exit(1)


if __name__ == '__main__':
    main()
