"""
색상 유틸리티

인물 배지 색상 생성 및 검증.
"""

import random
import re

from core.constants import ColorDefaults

# #RGB / #RRGGBB (편집 폼의 color picker가 보내는 형식)
_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# hsl(210.5, 60%, 35%) (자동 생성 형식)
_HSL_COLOR = re.compile(
    r"^hsl\(\s*(?P<h>\d+(?:\.\d+)?)\s*,\s*(?P<s>\d+(?:\.\d+)?)%\s*,"
    r"\s*(?P<l>\d+(?:\.\d+)?)%\s*\)$"
)


def generate_dark_color(rng: random.Random | None = None) -> str:
    """어두운 배지 색상 생성

    색상(hue)은 [0, 360) 균등 분포, 채도 60% / 명도 35% 고정.

    Args:
        rng: 난수 생성기 (테스트에서 시드 고정용)

    Returns:
        "hsl(H, 60%, 35%)" 형식 문자열
    """
    source = rng if rng is not None else random
    hue = round(source.uniform(0, ColorDefaults.HUE_MAX), 3) % ColorDefaults.HUE_MAX
    return (
        f"hsl({hue:g}, {ColorDefaults.SATURATION}%, "
        f"{ColorDefaults.LIGHTNESS}%)"
    )


def is_valid_color(value: str) -> bool:
    """색상 문자열 형식 검증 (hex 또는 hsl)"""
    if _HEX_COLOR.match(value):
        return True

    match = _HSL_COLOR.match(value)
    if match is None:
        return False

    return (
        float(match.group("h")) < ColorDefaults.HUE_MAX
        and float(match.group("s")) <= 100
        and float(match.group("l")) <= 100
    )
