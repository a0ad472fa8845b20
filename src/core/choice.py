"""플레이어 선택 인터페이스 (메뉴/입력 수단과 무관)

상태 머신(전투/장비/상점)은 이 계약만 사용한다.
구현체는 src/cli/prompt.py 참조.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

QUIT = -1


def clamp_selection(selection: int, option_count: int) -> int:
    """범위 밖 선택은 에러 없이 [0, option_count-1]로 보정."""
    if option_count <= 0:
        return 0
    return max(0, min(selection, option_count - 1))


class ChoicePrompt(ABC):
    """선택지 제시 + 대기 + 문자열 입력"""

    @abstractmethod
    def choose(
        self, header: str, options: Sequence[Any], allow_quit: bool = False
    ) -> int:
        """0부터 시작하는 선택 인덱스, 또는 allow_quit일 때 QUIT(-1).

        선택지가 없으면 입력 없이 QUIT.
        """
        ...

    @abstractmethod
    def pause(self, message: str = "") -> None:
        """메시지 표시 후 아무 입력 대기"""
        ...

    @abstractmethod
    def ask(self, message: str) -> str:
        """한 줄 입력 (앞뒤 공백 제거)"""
        ...

    def confirm(self, header: str) -> bool:
        """yes/no 확인. yes면 True."""
        return self.choose(header, ["yes", "no"], allow_quit=False) == 0
