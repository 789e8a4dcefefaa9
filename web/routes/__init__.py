"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- people: 인물 추가/수정
- records: 기록 추가/수정/삭제/정산 토글
- ledger: 목록 화면 및 잔액 조회
"""
