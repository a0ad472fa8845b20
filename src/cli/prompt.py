"""ChoicePrompt 구현체

ConsolePrompt: stdin 한 줄 입력 (번호 선택, q = 종료)
ScriptedPrompt: 정해진 응답을 순서대로 재생 (테스트/데모용)
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, Union

from src.core.choice import QUIT, ChoicePrompt, clamp_selection
from src.core.logging import get_logger

logger = get_logger(__name__)

CLEAR_SEQUENCE = "\033[2J\033[H"


class ConsolePrompt(ChoicePrompt):
    """터미널 입출력"""

    def __init__(
        self,
        clear_screen: bool = True,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._clear_screen = clear_screen
        self._input = input_fn
        self._output = output_fn

    def clear(self) -> None:
        if self._clear_screen:
            self._output(CLEAR_SEQUENCE)

    def render_options(self, options: Sequence[Any], allow_quit: bool) -> str:
        lines = []
        if allow_quit:
            lines.append("Type Q to quit.")
        for n, option in enumerate(options):
            lines.append(f"{n + 1}: {option}")
        return "\n".join(lines)

    def parse_selection(self, raw: str, option_count: int, allow_quit: bool) -> int | None:
        """입력 해석. 해석 불가면 None (다시 묻기)."""
        text = raw.strip().lower()
        if allow_quit and text == "q":
            return QUIT
        if not text:
            return 0
        if not text.lstrip("-").isdigit():
            return None
        return clamp_selection(int(text) - 1, option_count)

    def choose(
        self, header: str, options: Sequence[Any], allow_quit: bool = False
    ) -> int:
        if not options:
            return QUIT
        while True:
            self.clear()
            self._output(header)
            self._output(self.render_options(options, allow_quit))
            selection = self.parse_selection(self._input("> "), len(options), allow_quit)
            if selection is not None:
                return selection
            logger.debug("Unrecognised selection, asking again")

    def pause(self, message: str = "") -> None:
        self._output(message)
        self._input("")

    def ask(self, message: str) -> str:
        self._output(message)
        return self._input("> ").strip()


Answer = Union[int, str]


class ScriptedPrompt(ChoicePrompt):
    """응답 목록 재생.

    choose()는 int 응답을 소비하고 (QUIT은 allow_quit일 때만 통과, 나머지는 보정),
    ask()는 str 응답을 소비한다. 표시된 화면은 screens에 기록된다.
    """

    def __init__(self, answers: Iterable[Answer] = ()):
        self._answers = list(answers)
        self.screens: list[str] = []
        self.messages: list[str] = []

    def _next(self) -> Answer:
        if not self._answers:
            raise RuntimeError("ScriptedPrompt ran out of answers")
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def choose(
        self, header: str, options: Sequence[Any], allow_quit: bool = False
    ) -> int:
        self.screens.append(header)
        if not options:
            return QUIT
        answer = int(self._next())
        if answer == QUIT and allow_quit:
            return QUIT
        return clamp_selection(answer, len(options))

    def pause(self, message: str = "") -> None:
        self.messages.append(message)

    def ask(self, message: str) -> str:
        self.screens.append(message)
        return str(self._next()).strip()
