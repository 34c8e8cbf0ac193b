from collections.abc import Mapping
from typing import Any

from jinja2 import DebugUndefined, Environment
from structlog import get_logger

from colloquy.shared.logger import Logger

logger: Logger = get_logger(__name__)

# Prompts are plain text: no auto-escaping, unknown placeholders are left in place.
_environment = Environment(
    autoescape=False,
    undefined=DebugUndefined,
    keep_trailing_newline=True,
)


def substitute_variables(
    content: str, variables: tuple[str, ...], replacements: Mapping[str, Any]
) -> str:
    """Fill the handlebar placeholders of *content* known to *replacements*.

    Only names listed in *variables* are substituted; content without a
    matching replacement is returned unchanged.
    """
    context = {name: replacements[name] for name in variables if name in replacements}
    if not context:
        return content

    unused = sorted(set(replacements) - set(variables))
    if unused:
        logger.debug("unused_template_replacements", names=unused)

    return _environment.from_string(content).render(**context)
