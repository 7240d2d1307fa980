"""합성 유틸리티 타입 정의"""
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Literal, TypeVar, Union

T = TypeVar('T')
R = TypeVar('R')


# ============================================================
# 파이프라인 타입
# ============================================================

# 단일 스텝: (value, *context) -> value
StepFn = Callable[..., Any]

# OR Type: 함수 | 중첩 시퀀스 | falsy 값 (flow에서 건너뜀)
Step = Union[StepFn, Sequence["Step"], None, bool, int, str]


# ============================================================
# map 타입
# ============================================================

# (value, key, collection) -> result, 앞쪽 인자만 받아도 됨
Iteratee = Callable[..., R]

# OR Type: 시퀀스 | 매핑 | 일반 객체 | None
Collection = Union[Sequence[T], Mapping[Any, T], object, None]

# 문자열류는 시퀀스로 취급하지 않음
TEXT_TYPES = (str, bytes, bytearray)


# ============================================================
# 설정 타입
# ============================================================

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
