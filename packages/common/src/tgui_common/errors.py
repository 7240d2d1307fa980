"""에러 타입 정의"""
from dataclasses import dataclass
from numbers import Number


# ============================================================
# 예외 (호출자에게 전파)
# ============================================================

class UnsupportedCollectionError(TypeError):
    """map()이 순회할 수 없는 값"""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"map() can't iterate on type {type_name}")


def runtime_type_name(value: object) -> str:
    """값의 런타임 분류 이름 (에러 메시지용)"""
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case Number():
            return "number"
        case str() | bytes() | bytearray():
            return "string"
        case _ if callable(value):
            return "function"
        case _:
            return type(value).__name__


# ============================================================
# 설정 에러 (값으로 반환)
# ============================================================

@dataclass(frozen=True)
class ConfigError:
    """설정 로드/검증 에러"""
    field: str
    message: str
    code: str = "CONFIG_ERROR"


def error_to_dict(error: ConfigError) -> dict:
    """에러를 딕셔너리로 변환"""
    match error:
        case ConfigError(field, message, code):
            return {"code": code, "field": field, "message": message}
