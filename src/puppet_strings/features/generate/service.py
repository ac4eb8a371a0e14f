"""Service implementation for documentation generation."""

import time
from typing import Optional, Sequence

import sentry_sdk

from puppet_strings.constants import DEFAULT_SEARCH_PATTERNS
from puppet_strings.core.engine import EngineContext, get_default_context, setup_engine
from puppet_strings.core.logging import get_logger
from puppet_strings.features.generate.arguments import build_yard_args
from puppet_strings.features.json.renderer import JsonRenderer
from puppet_strings.models.options import OptionsLike, coerce_options


def generate(
    search_patterns: Sequence[str] = DEFAULT_SEARCH_PATTERNS,
    options: OptionsLike = None,
    context: Optional[EngineContext] = None,
) -> None:
    """Generate documentation.

    Runs ``yard doc`` over the search patterns and, when the ``json`` option
    was supplied, renders the resulting registry as JSON afterwards.

    Args:
        search_patterns: The search patterns (e.g. manifests/**/*.pp) to look for files
        options: GenerationOptions or a mapping of options
        context: Engine context; the process-wide default when None

    Raises:
        EngineNotFoundError: If yard is not installed
        EngineExecutionError: If yard fails
        RenderError: If the JSON report cannot be rendered
    """
    logger = get_logger("generate")
    context = context or get_default_context()
    opts = coerce_options(options)

    setup_engine(context)
    args = build_yard_args(search_patterns, opts)

    logger.info("generation_started", args=args, render_as_json=opts.render_as_json)
    start_time = time.time()

    with sentry_sdk.start_span(op="strings.generate", name="Generating documentation") as span:
        span.set_data("pattern_count", len(search_patterns))
        span.set_data("render_as_json", opts.render_as_json)

        context.generated = False
        with context.running() as engine:
            engine.run_generation(args)
        context.generated = True

        logger.info("generation_completed", execution_time_seconds=round(time.time() - start_time, 3))

        if opts.json is not None:
            JsonRenderer(context).render(opts.json.destination)
