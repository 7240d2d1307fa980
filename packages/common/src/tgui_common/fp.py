"""함수 합성 유틸리티

flow/compose로 만든 파이프라인은 (value, *context) 형태로 호출된다.
context 인자는 모든 스텝에 그대로 전달되고, value만 스텝마다 바뀐다.
"""
import inspect
import logging
from collections.abc import Mapping, Sequence
from functools import reduce
from typing import Any, Callable

from tgui_common.errors import UnsupportedCollectionError, runtime_type_name
from tgui_common.types import Collection, Iteratee, Step, StepFn, TEXT_TYPES

logger = logging.getLogger(__name__)


def identity(value: Any, *context: Any) -> Any:
    """항등 함수 (context는 버림)"""
    return value


# ============================================================
# flow / compose
# ============================================================

def flow(*funcs: Step) -> Callable[..., Any]:
    """
    왼쪽에서 오른쪽으로 함수 합성

    리스트/튜플 스텝은 중첩 flow로 실행하고, falsy 스텝은 건너뛴다.
    """
    def run(value: Any, *context: Any) -> Any:
        output = value
        for index, func in enumerate(funcs):
            match func:
                case list() | tuple():
                    output = flow(*func)(output, *context)
                # callable 여부가 아니라 truthiness로 판단 (__bool__/__len__이 거짓이면 건너뜀)
                case _ if func:
                    output = func(output, *context)
                case _:
                    logger.debug("flow: skipping step %d (%r)", index, func)
        return output
    return run


def _combine(a: StepFn, b: StepFn) -> StepFn:
    def composed(value: Any, *context: Any) -> Any:
        return a(b(value, *context), *context)
    return composed


def compose(*funcs: StepFn) -> StepFn:
    """
    오른쪽에서 왼쪽으로 함수 합성

    compose(f, g, h)(x, *ctx) == f(g(h(x, *ctx), *ctx), *ctx)
    """
    if not funcs:
        return identity
    if len(funcs) == 1:
        return funcs[0]
    return reduce(_combine, funcs)


# ============================================================
# map
# ============================================================

def _positional_arity(fn: Callable[..., Any]) -> int:
    """fn이 위치 인자로 받을 수 있는 개수 (최대 3)"""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        # 시그니처를 알 수 없는 내장 함수
        return 1

    count = 0
    for p in params:
        if p.kind is p.VAR_POSITIONAL:
            return 3
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            count += 1
    return max(1, min(count, 3))


def _entries(collection: Collection) -> list[tuple[Any, Any]] | None:
    """(key, value) 목록, 순회 불가면 None"""
    match collection:
        case Mapping():
            return [(k, collection[k]) for k in collection]
        case Sequence() if not isinstance(collection, TEXT_TYPES):
            return list(enumerate(collection))
        case _ if not callable(collection) and hasattr(collection, "__dict__"):
            # 인스턴스 자신의 속성만 (클래스 속성 제외)
            return list(vars(collection).items())
        case _:
            return None


def map(iterator_fn: Iteratee, *, null_passthrough: bool = True) -> Callable[[Collection], list | None]:
    """
    컬렉션의 각 원소에 iterator_fn을 적용해 리스트로 반환

    iterator_fn은 (value, index|key, collection) 중 받을 수 있는 만큼 받는다.
    None은 null_passthrough가 켜져 있으면 그대로 반환한다.
    """
    arity = _positional_arity(iterator_fn)

    def apply(collection: Collection) -> list | None:
        if collection is None and null_passthrough:
            return None
        entries = _entries(collection)
        if entries is None:
            raise UnsupportedCollectionError(runtime_type_name(collection))
        return [
            iterator_fn(*(value, key, collection)[:arity])
            for key, value in entries
        ]
    return apply
