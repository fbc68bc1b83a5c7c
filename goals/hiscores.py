"""
OSRS Hiscores 클라이언트

캐릭터의 현재 스킬/활동 수치를 조회합니다.
목표 생성 시 시작 진행도를 채우는 용도로만 사용됩니다.

참고:
- https://secure.runescape.com/m=hiscore_oldschool/index_lite.json?player=NAME
"""

import logging
from typing import Any, Dict, Optional

import requests

from goals.errors import HiscoresError

logger = logging.getLogger(__name__)

SKILL_TARGET_TYPES = {"xp": "xp", "level": "level"}


class HiscoresClient:
    """
    Hiscores REST API 클라이언트

    Examples:
        >>> client = HiscoresClient()
        >>> client.get_character_standing("Zezima", "Woodcutting", "xp")
        13034431
    """

    def __init__(
        self,
        base_url: str = "https://secure.runescape.com/m=hiscore_oldschool",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            base_url: Hiscores API 기본 URL
            timeout: 요청 타임아웃 (초)
            session: 재사용할 requests 세션 (없으면 새로 생성)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_hiscores(self, character_name: str) -> Dict[str, Any]:
        """캐릭터의 전체 hiscores JSON 조회"""
        url = f"{self.base_url}/index_lite.json"

        try:
            response = self.session.get(url, params={"player": character_name}, timeout=self.timeout)
            if response.status_code == 404:
                raise HiscoresError(character_name, "Character not found.")
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Hiscores request failed for character %s: %s", character_name, e)
            raise HiscoresError(character_name, f"Hiscores request failed: {e}") from e

        # requests.JSONDecodeError도 ValueError
        try:
            return response.json()
        except ValueError as e:
            logger.error("Hiscores returned invalid JSON for character %s", character_name)
            raise HiscoresError(character_name, "Hiscores returned invalid JSON.") from e

    def get_character_standing(self, character_name: str, target_attribute: str, target_type: str) -> int:
        """
        목표 대상 수치 조회

        Args:
            character_name: 캐릭터 이름
            target_attribute: 스킬/활동 이름 (예: Woodcutting, Bounty Hunter - Hunter)
            target_type: xp / level 이면 스킬 값, 그 외는 활동 score

        Returns:
            현재 수치 (랭크 밖(-1)이면 0)
        """
        data = self.get_hiscores(character_name)
        wanted = target_attribute.strip().lower()
        field = SKILL_TARGET_TYPES.get(target_type.strip().lower())

        if field is not None:
            entries, value_key = data.get("skills", []), field
        else:
            entries, value_key = data.get("activities", []), "score"

        for entry in entries:
            if str(entry.get("name", "")).lower() == wanted:
                try:
                    value = int(entry.get(value_key, -1))
                except (TypeError, ValueError) as e:
                    raise HiscoresError(
                        character_name, f"Hiscores returned a non-numeric {value_key} for '{target_attribute}'."
                    ) from e
                logger.debug(
                    "Hiscores standing for %s %s/%s: %d",
                    character_name, target_attribute, target_type, value,
                )
                return max(value, 0)

        raise HiscoresError(character_name, f"Unknown hiscores attribute '{target_attribute}'.")
