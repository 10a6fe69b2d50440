"""
archivarius: 디렉터리 → ZIP 아카이브 압축/해제 서비스.

레이어:
- domain/ → 에러, 스키마, 상수
- core/ → 선택/압축/해제 엔진, 세션 상태 머신
- app/ → FastAPI 라우트 (얇게 유지, core에 위임)
"""

__version__ = "0.1.0"
