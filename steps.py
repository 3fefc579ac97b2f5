"""
Шаги сценария для читаемого лога.

step() оборачивает именованное действие: пишет в лог начало, длительность
и падение шага, исключение пробрасывает дальше без изменений.
Вложенные шаги логируются с отступом.
"""
import logging
import threading
import time
from contextlib import contextmanager

logger = logging.getLogger(__name__)

_state = threading.local()


def current_depth():
    """Текущая глубина вложенности шагов в этом потоке."""
    return getattr(_state, "depth", 0)


@contextmanager
def step(title):
    """
    Логирует именованный шаг.

    :param title: Название шага (например, "Book a Room 'Single'")
    """
    depth = current_depth()
    indent = "  " * depth
    logger.info("%s[STEP] %s", indent, title)
    started = time.monotonic()
    _state.depth = depth + 1
    try:
        yield
    except BaseException as exc:
        logger.error("%s[FAIL] %s: %s", indent, title, type(exc).__name__)
        raise
    else:
        logger.info("%s[OK] %s (%.2fs)", indent, title, time.monotonic() - started)
    finally:
        _state.depth = depth
