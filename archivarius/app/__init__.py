"""
App layer: HTTP 서버 (FastAPI).

역할:
- 요청 JSON 파싱/검증, 응답 변환
- 세션 레지스트리와 job runner 소유 (app.state)
- ⚠️ 아카이브 로직 없음 (core에 위임)
"""
