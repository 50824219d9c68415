"""
GenerationInvoker: one completion with retry and model escalation.

Transient failures (overload, rate limit, timeout) are retried on the same
model with exponential backoff; after that, or on a permanent failure, the
fallback model gets exactly one try.
"""

import logging
import re
import time
from collections.abc import Callable

from paletteguard.application.config import InvokerConfig
from paletteguard.domain.exceptions import GenerationUnavailable
from paletteguard.domain.interfaces import CompletionClientInterface

logger = logging.getLogger(__name__)

TRANSIENT_ERROR = re.compile(
    r"overloaded|503|unavailable|timeout|timed out|rate limit|busy|quota|429"
    r"|too many requests",
    re.IGNORECASE,
)


def is_transient(error: BaseException) -> bool:
    """Classify an error by its message (and exception type name)."""
    return bool(TRANSIENT_ERROR.search(f"{type(error).__name__}: {error}"))


def _classify(error: BaseException) -> str:
    return "transient" if is_transient(error) else "permanent"


class GenerationInvoker:
    """Sends prompts to a completion client under the retry policy."""

    def __init__(
        self,
        client: CompletionClientInterface,
        config: InvokerConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            client: The completion capability
            config: Retry/fallback policy (defaults to InvokerConfig())
            sleep: Sleep function, injectable for tests
        """
        self._client = client
        self._config = config or InvokerConfig()
        self._sleep = sleep

    def invoke(self, prompt: str, primary_model: str) -> str:
        """
        Return the completion text for ``prompt``.

        Raises:
            GenerationUnavailable: If the primary model (with retries) and
                the fallback model both failed. Carries the primary error.
        """
        primary_error: Exception | None = None
        for attempt in range(self._config.retries + 1):
            if attempt:
                delay = self._config.backoff_base * 2 ** (attempt - 1)
                logger.info(
                    "Retrying %s in %.1fs (retry %d/%d)",
                    primary_model,
                    delay,
                    attempt,
                    self._config.retries,
                )
                self._sleep(delay)
            try:
                return self._client.complete(primary_model, prompt)
            except Exception as err:
                primary_error = err
                logger.warning(
                    "Model %s failed (%s): %s", primary_model, _classify(err), err
                )
                if not is_transient(err):
                    break

        assert primary_error is not None
        fallback_model = self._config.fallback_model
        logger.warning(
            "Escalating from %s to fallback model %s", primary_model, fallback_model
        )
        try:
            return self._client.complete(fallback_model, prompt)
        except Exception as fallback_error:
            logger.warning(
                "Fallback model %s failed (%s): %s",
                fallback_model,
                _classify(fallback_error),
                fallback_error,
            )
            raise GenerationUnavailable(
                primary_model, fallback_model, primary_error, fallback_error
            ) from primary_error
