"""
유틸리티 패키지

금액/날짜 파싱 및 포맷, 배지 색상 생성 등 공통 유틸리티
"""

from core.utils.amount import format_amount, parse_amount, parse_date, round_amount
from core.utils.color import generate_dark_color, is_valid_color

__all__ = [
    "format_amount",
    "parse_amount",
    "parse_date",
    "round_amount",
    "generate_dark_color",
    "is_valid_color",
]
