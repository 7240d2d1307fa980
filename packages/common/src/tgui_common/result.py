"""Result 타입 (설정 로더용)"""
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


# ============================================================
# Result Type (OR Type)
# ============================================================

@dataclass(frozen=True)
class Success(Generic[T]):
    """성공 트랙"""
    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """실패 트랙"""
    error: E

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Union[Success[T], Failure[E]]


# ============================================================
# Result 연산 (순수 함수)
# ============================================================

def bind(
    result: Result[T, E],
    f: Callable[[T], Result[U, E]]
) -> Result[U, E]:
    """Result 반환 함수 체이닝"""
    match result:
        case Success(value):
            return f(value)
        case Failure() as err:
            return err


def unwrap_or_else(result: Result[T, E], f: Callable[[E], T]) -> T:
    """값 추출 또는 에러로부터 계산"""
    match result:
        case Success(value):
            return value
        case Failure(error):
            return f(error)
