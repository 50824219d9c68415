"""
PaletteOrchestrator: the bounded generate-normalize-validate loop.

Each attempt re-runs the whole chain (compose, invoke, normalize,
validate) from scratch. When every attempt fails the loop ends in
deterministic fallback synthesis, so callers always receive a palette.
"""

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from paletteguard.application.config import OrchestratorConfig
from paletteguard.application.invoker import GenerationInvoker
from paletteguard.domain.exceptions import GenerationUnavailable, UnparsableResponse
from paletteguard.domain.fallback import build_fallback_palette
from paletteguard.domain.gradients import base_color_gradients
from paletteguard.domain.interfaces import CompletionClientInterface
from paletteguard.domain.models import (
    AttemptRecord,
    GenerationResult,
    GenerationState,
    OutputShape,
    Palette,
)
from paletteguard.domain.normalization import ResponseNormalizer
from paletteguard.domain.prompts import compose_prompt
from paletteguard.domain.request import RequestSpec
from paletteguard.guards import PaletteValidator

logger = logging.getLogger(__name__)

TERMINAL_STATES = (GenerationState.ACCEPTED, GenerationState.FALLBACK_SYNTHESIS)


class PaletteOrchestrator:
    """
    Runs the palette pipeline as an explicit state machine.

    COMPOSING -> INVOKING -> NORMALIZING -> VALIDATING, then ACCEPTED,
    RETRYING (back to COMPOSING) or FALLBACK_SYNTHESIS.
    """

    def __init__(
        self,
        client: CompletionClientInterface,
        config: OrchestratorConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            client: The completion capability
            config: Attempt and retry policy (defaults to OrchestratorConfig())
            sleep: Sleep function shared with the invoker, injectable for tests
        """
        self._config = config or OrchestratorConfig()
        self._invoker = GenerationInvoker(client, self._config.invoker, sleep)
        self._normalizer = ResponseNormalizer()
        self._sleep = sleep

    def generate(self, options: Mapping[str, Any] | None = None) -> Palette:
        """
        Validate ``options`` and generate a palette.

        Raises:
            InvalidParameter: If the options are malformed. Generation
                failures never raise; they resolve to the fallback palette.
        """
        spec = RequestSpec.from_options(options)
        return self.run(spec).palette

    def run(self, spec: RequestSpec) -> GenerationResult:
        validator = PaletteValidator(spec.accessibility_level, spec.color_count)
        max_attempts = self._config.max_attempts
        delay = self._config.retry_delay

        state = GenerationState.COMPOSING
        attempt = 1
        history: list[AttemptRecord] = []
        prompt = ""
        completion = ""
        draft: Palette | None = None
        warnings: tuple[str, ...] = ()

        while state not in TERMINAL_STATES:
            if state is GenerationState.COMPOSING:
                logger.info("Palette attempt %d/%d", attempt, max_attempts)
                prompt = compose_prompt(spec).render()
                state = GenerationState.INVOKING

            elif state is GenerationState.INVOKING:
                try:
                    completion = self._invoker.invoke(prompt, spec.model)
                except GenerationUnavailable as err:
                    history.append(AttemptRecord(attempt, state, str(err)))
                    logger.warning("Attempt %d: generation unavailable: %s", attempt, err)
                    state = self._after_failure(attempt)
                except Exception as err:
                    state = self._unexpected_failure(history, attempt, state, err)
                else:
                    state = GenerationState.NORMALIZING

            elif state is GenerationState.NORMALIZING:
                try:
                    draft = self._normalizer.normalize(completion, spec)
                except UnparsableResponse as err:
                    history.append(AttemptRecord(attempt, state, err.reason))
                    logger.warning("Attempt %d: unparsable response: %s", attempt, err.reason)
                    state = self._after_failure(attempt)
                except Exception as err:
                    state = self._unexpected_failure(history, attempt, state, err)
                else:
                    state = GenerationState.VALIDATING

            elif state is GenerationState.VALIDATING:
                assert draft is not None
                result = validator.validate(draft)
                warnings = result.warnings
                if result.valid:
                    state = GenerationState.ACCEPTED
                else:
                    history.append(AttemptRecord(attempt, state, result.feedback))
                    logger.warning(
                        "Attempt %d: palette rejected: %s", attempt, result.feedback
                    )
                    state = self._after_failure(attempt)

            elif state is GenerationState.RETRYING:
                logger.info("Retrying palette generation in %.2fs", delay)
                self._sleep(delay)
                delay *= self._config.backoff_factor
                attempt += 1
                draft = None
                state = GenerationState.COMPOSING

        if state is GenerationState.ACCEPTED:
            assert draft is not None
            logger.info("Palette accepted on attempt %d/%d", attempt, max_attempts)
            return GenerationResult(
                palette=self._finalize(draft, spec),
                status=state,
                attempts=tuple(history),
                warnings=warnings,
            )

        logger.error(
            "All %d palette attempts failed; using fallback palette (%s)",
            max_attempts,
            ", ".join(record.state.value for record in history),
        )
        return GenerationResult(
            palette=build_fallback_palette(spec),
            status=state,
            attempts=tuple(history),
        )

    def _after_failure(self, attempt: int) -> GenerationState:
        if attempt < self._config.max_attempts:
            return GenerationState.RETRYING
        return GenerationState.FALLBACK_SYNTHESIS

    def _unexpected_failure(
        self,
        history: list[AttemptRecord],
        attempt: int,
        state: GenerationState,
        err: Exception,
    ) -> GenerationState:
        """Record an error no step anticipated; it costs one attempt like any other."""
        history.append(AttemptRecord(attempt, state, f"{type(err).__name__}: {err}"))
        logger.exception("Attempt %d: unexpected error while %s", attempt, state.value)
        return self._after_failure(attempt)

    def _finalize(self, palette: Palette, spec: RequestSpec) -> Palette:
        """Merge base-color gradients into accepted full-shape palettes."""
        if (
            not spec.base_color
            or not spec.include_gradients
            or spec.output_shape is not OutputShape.FULL
        ):
            return palette

        def hex_of(role: str) -> str | None:
            color = palette.colors.get(role)
            return color.hex if color else None

        gradients = base_color_gradients(
            spec.base_color,
            primary=hex_of("primary"),
            accent=hex_of("accent"),
            neutral=hex_of("neutral"),
        )
        return replace(palette, gradients={**palette.gradients, **gradients})


def generate(
    options: Mapping[str, Any] | None,
    client: CompletionClientInterface,
    config: OrchestratorConfig | None = None,
) -> Palette:
    """
    Generate a palette for ``options`` using ``client``.

    Raises:
        InvalidParameter: If the options are malformed.
    """
    return PaletteOrchestrator(client, config).generate(options)
