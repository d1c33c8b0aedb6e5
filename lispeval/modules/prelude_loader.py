from __future__ import annotations

import logging
from typing import Protocol

from lispeval.config import get_prelude_root

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate core.lisp from the prelude root into `itp`."""
    core = get_prelude_root() / 'core.lisp'
    if not core.is_file():
        raise FileNotFoundError(f"Cannot find prelude {core} (see LISPEVAL_PRELUDE_PATH)")
    logger.debug("loading prelude from %s", core)
    itp.eval_prelude(core.read_text(encoding='utf-8'))
