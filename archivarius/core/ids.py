"""
ID 생성: session_id

규칙:
- 세션 ID는 추측 불가능해야 함 (UUID v4)
- 프로세스 수명 동안 재사용 금지
"""

import uuid


def generate_session_id() -> str:
    """
    Session ID 생성.

    포맷: 표준 UUID 문자열 (예: 1b4e28ba-2fa1-41d2-883f-0016d3cca427)

    Returns:
        session_id 문자열
    """
    return str(uuid.uuid4())
