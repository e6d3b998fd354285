from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_AGENT_NAME


@dataclass(frozen=True)
class Agent:
    """Thực thể miền (domain): thành viên roster được báo cáo chấm công.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    user_id: str
    full_name: Optional[str]
    username: Optional[str]
    team_id: Optional[str] = None
    is_active: bool = True

    @property
    def display_name(self) -> str:
        return self.full_name or self.username or DEFAULT_AGENT_NAME
