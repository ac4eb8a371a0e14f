"""Translation of generation options into a YARD argument list."""

from typing import List, Sequence

from puppet_strings.constants import EngineDefaults, YardFlags
from puppet_strings.models.options import OptionsLike, coerce_options


def build_yard_args(search_patterns: Sequence[str], options: OptionsLike = None) -> List[str]:
    """Build the arguments for ``yard doc``.

    The list is assembled in a fixed order: the ``doc`` subcommand, debug and
    backtrace flags, the markup selector, JSON-mode output suppression, the
    raw ``yard_args`` and finally the search patterns.

    When rendering JSON to standard output, YARD's own console output,
    statistics and progress are also silenced so they do not interleave with
    the report. A JSON file destination only disables YARD's HTML output.

    Args:
        search_patterns: Glob patterns of the files to document
        options: GenerationOptions or a mapping with the keys ``debug``,
            ``backtrace``, ``markup``, ``json`` and ``yard_args``

    Returns:
        Argument list for the engine
    """
    opts = coerce_options(options)

    args = [YardFlags.DOC]
    if opts.debug:
        args.append(YardFlags.DEBUG)
    if opts.backtrace:
        args.append(YardFlags.BACKTRACE)
    args.append(f"{YardFlags.MARKUP_PREFIX}{opts.markup or EngineDefaults.DEFAULT_MARKUP}")

    if opts.json is not None:
        args.append(YardFlags.NO_OUTPUT)
        if opts.json.to_stdout:
            args += [YardFlags.QUIET, YardFlags.NO_STATS, YardFlags.NO_PROGRESS]

    if opts.yard_args:
        args += opts.yard_args
    args += search_patterns
    return args
