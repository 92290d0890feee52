import logging
import sys


def _render(message: str, fields: dict[str, object]) -> str:
    if not fields:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    return f"{message} | {pairs}"


class Log:
    """Process-wide logging facade for the notary services.

    Keyword arguments are appended to the message as ``key=value`` pairs so
    submitter, item id and write references stay greppable in plain output.
    """

    _logger: logging.Logger = logging.getLogger("notary")

    @classmethod
    def configure(cls, log_level: str, app_env: str = "dev") -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter(
                    f"%(asctime)s [%(levelname)s] [{app_env}] %(message)s"
                )
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(_render(message, fields))

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._logger.error(_render(message, fields))

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        """Degraded but handled paths: fallbacks, swallowed audit failures."""
        cls._logger.warning(_render(message, fields))

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._logger.debug(_render(message, fields))
