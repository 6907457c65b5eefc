# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета + проверка OpenGL‑ошибок после выгрузки буферов.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "objmesh"


def init_logger(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)


logger = init_logger()


def set_level(level) -> None:
    """Сменить уровень логгера (принимает int или имя: "DEBUG", "INFO"…)."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)


def gl_check_error(context: str = "", gl=None) -> bool:
    """Проверить glGetError и вывести в лог, если что‑то не так.

    Возвращает True, если ошибок не было. `gl` – модуль OpenGL.GL
    (по умолчанию импортируется здесь, без контекста не нужен).
    """
    if gl is None:
        from OpenGL import GL as gl
    err = gl.glGetError()
    if err != gl.GL_NO_ERROR:
        logger.error(f"OpenGL error 0x{int(err):04X} [{context}]")
        return False
    return True
