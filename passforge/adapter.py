"""Bridge between host user interfaces and the passforge core.

A host (terminal, Streamlit page, ...) implements :class:`UIAdapter`; the
:class:`PasswordController` reads plain values from it, runs the core and
hands plain values back for rendering.
"""

import logging
import random
from typing import Protocol

from passforge import GenerationOptions, analyze_password, generate_from_options

logger = logging.getLogger(__name__)


class UIAdapter(Protocol):
    def read_options(self) -> GenerationOptions: ...

    def render_password(self, password: str) -> None: ...

    def read_password_input(self) -> str: ...

    def render_analysis(self, score: int, messages: list[str]) -> None: ...


class PasswordController:
    def __init__(self, adapter: UIAdapter, rng: random.Random | None = None):
        self.adapter = adapter
        self.rng = rng

    def generate(self) -> str:
        """Generate a password from the adapter's options and render it."""
        options = self.adapter.read_options()
        logger.debug("generating with %s", options)
        password = generate_from_options(options, rng=self.rng)
        self.adapter.render_password(password)
        return password

    def analyze(self) -> dict:
        """Analyse the adapter's current input and render the report."""
        report = analyze_password(self.adapter.read_password_input())
        self.adapter.render_analysis(report["score"], report["messages"])
        return report
