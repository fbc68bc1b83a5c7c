"""
Goal Tracker 예외 정의

- InvalidArgument: 입력값 오류 (I/O 이전에 검출, 호출자가 입력을 고쳐 재시도 가능)
- StorageFailure: 원자적 쓰기가 완료되지 않음 (부분 반영 없음)
- HiscoresError: 외부 hiscores 조회 실패
"""


class GoalTrackerError(Exception):
    """Goal Tracker 예외의 기본 클래스"""

    def __init__(self, message: str = "An unspecified goal tracker error occurred."):
        self.message = message
        super().__init__(message)


class InvalidArgument(GoalTrackerError):
    """잘못되었거나 누락된 입력 필드"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class StorageFailure(GoalTrackerError):
    """원자적 다중 레코드 쓰기 실패"""

    def __init__(self, message: str = "Atomic write failed."):
        super().__init__(message)


class HiscoresError(GoalTrackerError):
    """Hiscores 조회 실패"""

    def __init__(self, character_name: str, message: str = "Hiscores lookup failed."):
        self.character_name = character_name
        super().__init__(f"{message} Character: '{character_name}'")
