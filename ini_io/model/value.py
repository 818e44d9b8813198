"""Valeurs scalaires typées des entrées INI.

Une valeur est un couple immuable (type, contenu) dont le type est
déduit de la syntaxe du littéral :

    "texte"   -> TEXT
    'c'       -> CHAR
    42        -> INT32 (INT64 au-delà de 32 bits)
    1.5       -> FLOAT64

Les constructeurs explicites (Value.float32, Value.int64, ...) permettent
de produire les autres variantes depuis le code.
"""

import math
import re
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ini_io.errors.exceptions import InvalidValueError

TEXT_QUOTE = '"'
CHAR_QUOTE = "'"

INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
INT64_MIN, INT64_MAX = -2**63, 2**63 - 1

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

Payload = Union[str, int, float]


class ValueKind(Enum):
    """Types de valeurs supportés."""

    TEXT = "text"
    CHAR = "char"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def family(self) -> str:
        """Famille de comparaison : text, char, integer ou float."""
        if self in (ValueKind.INT32, ValueKind.INT64):
            return "integer"
        if self in (ValueKind.FLOAT32, ValueKind.FLOAT64):
            return "float"
        return self.value

    @property
    def is_numeric(self) -> bool:
        return self.family in ("integer", "float")


def _to_float32(number: float) -> float:
    """Arrondit un float Python à la précision simple."""
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except (OverflowError, struct.error):
        raise InvalidValueError(
            f"{number!r} dépasse la plage d'un float 32 bits"
        )


@dataclass(frozen=True, eq=False)
class Value:
    """Valeur scalaire typée, immuable.

    L'égalité est structurelle à l'intérieur d'une famille numérique :
    INT32(5) == INT64(5) et FLOAT32(0.5) == FLOAT64(0.5), mais
    TEXT("5") != INT32(5).

    Attributes:
        kind: Type de la valeur.
        payload: Contenu Python (str, int ou float) cohérent avec kind.
    """

    kind: ValueKind
    payload: Payload

    def __post_init__(self) -> None:
        """Vérifie que le contenu correspond au type annoncé.

        Raises:
            InvalidValueError: Si le contenu ne correspond pas.
        """
        kind, payload = self.kind, self.payload
        if not isinstance(kind, ValueKind):
            raise InvalidValueError(f"Type de valeur inconnu : {kind!r}")

        if kind is ValueKind.TEXT:
            valid = isinstance(payload, str)
        elif kind is ValueKind.CHAR:
            valid = isinstance(payload, str) and len(payload) == 1
        elif kind is ValueKind.INT32:
            valid = (_is_int(payload)
                     and INT32_MIN <= payload <= INT32_MAX)
        elif kind is ValueKind.INT64:
            valid = (_is_int(payload)
                     and INT64_MIN <= payload <= INT64_MAX)
        else:
            valid = isinstance(payload, float) and math.isfinite(payload)

        if not valid:
            raise InvalidValueError(
                f"{payload!r} n'est pas une valeur {kind.value} valide"
            )

    # -- Constructeurs -------------------------------------------------

    @classmethod
    def text(cls, payload: str) -> "Value":
        return cls(ValueKind.TEXT, payload)

    @classmethod
    def char(cls, payload: str) -> "Value":
        return cls(ValueKind.CHAR, payload)

    @classmethod
    def int32(cls, payload: int) -> "Value":
        return cls(ValueKind.INT32, payload)

    @classmethod
    def int64(cls, payload: int) -> "Value":
        return cls(ValueKind.INT64, payload)

    @classmethod
    def float32(cls, payload: float) -> "Value":
        if _is_int(payload):
            payload = float(payload)
        if isinstance(payload, float):
            payload = _to_float32(payload)
        return cls(ValueKind.FLOAT32, payload)

    @classmethod
    def float64(cls, payload: float) -> "Value":
        if _is_int(payload):
            payload = float(payload)
        return cls(ValueKind.FLOAT64, payload)

    @classmethod
    def empty(cls) -> "Value":
        """Valeur texte vide, utilisée à la place d'une valeur absente."""
        return cls(ValueKind.TEXT, "")

    @classmethod
    def of(cls, obj: Any) -> "Value":
        """Convertit un objet Python en valeur.

        None devient un texte vide, str un texte, int un INT32 ou un
        INT64 selon sa plage, float un FLOAT64.

        Args:
            obj: Objet à convertir (ou Value, retournée telle quelle).

        Returns:
            Valeur correspondante.

        Raises:
            InvalidValueError: Si le type de l'objet n'est pas supporté.
        """
        if obj is None:
            return cls.empty()
        if isinstance(obj, Value):
            return obj
        if isinstance(obj, str):
            return cls.text(obj)
        if _is_int(obj):
            if INT32_MIN <= obj <= INT32_MAX:
                return cls.int32(obj)
            return cls.int64(obj)
        if isinstance(obj, float):
            return cls.float64(obj)
        raise InvalidValueError(
            f"Type de valeur non supporté : {type(obj).__name__}"
        )

    @classmethod
    def infer(cls, literal: str) -> "Value":
        """Déduit une valeur de la syntaxe d'un littéral.

        L'ordre d'essai est : texte entre guillemets doubles, caractère
        entre guillemets simples, entier 32 bits, entier 64 bits, nombre
        décimal fini. Les espaces autour du littéral sont ignorés.

        Args:
            literal: Partie droite d'une ligne d'entrée.

        Returns:
            Valeur typée.

        Raises:
            InvalidValueError: Si le littéral ne correspond à aucune
                syntaxe reconnue.
        """
        if not isinstance(literal, str):
            raise InvalidValueError(f"Littéral invalide : {literal!r}")

        raw = literal.strip()

        if _is_quoted(raw, TEXT_QUOTE):
            return cls.text(raw[1:-1])

        if _is_quoted(raw, CHAR_QUOTE):
            inner = raw[1:-1]
            if not inner:
                raise InvalidValueError(
                    f"Caractère vide dans le littéral {literal!r}"
                )
            return cls.char(inner[0])

        if _INTEGER_LITERAL.fullmatch(raw):
            number = int(raw)
            if INT32_MIN <= number <= INT32_MAX:
                return cls.int32(number)
            if INT64_MIN <= number <= INT64_MAX:
                return cls.int64(number)
            raise InvalidValueError(
                f"Entier hors de la plage 64 bits : {literal!r}"
            )

        if _FLOAT_LITERAL.fullmatch(raw):
            number = float(raw)
            if math.isfinite(number):
                return cls.float64(number)

        raise InvalidValueError(f"Littéral de valeur invalide : {literal!r}")

    # -- Conversions ---------------------------------------------------

    def format(self) -> str:
        """Forme littérale de la valeur, relisible par infer()."""
        if self.kind is ValueKind.TEXT:
            return f"{TEXT_QUOTE}{self.payload}{TEXT_QUOTE}"
        if self.kind is ValueKind.CHAR:
            return f"{CHAR_QUOTE}{self.payload}{CHAR_QUOTE}"
        return str(self.payload)

    @property
    def family(self) -> str:
        return self.kind.family

    def __str__(self) -> str:
        return str(self.payload)

    def __repr__(self) -> str:
        return f"Value.{self.kind.value}({self.payload!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return (self.family == other.family
                and self.payload == other.payload)

    def __hash__(self) -> int:
        return hash((self.family, self.payload))


def _is_int(obj: Any) -> bool:
    # bool est une sous-classe de int
    return isinstance(obj, int) and not isinstance(obj, bool)


def _is_quoted(raw: str, quote: str) -> bool:
    return len(raw) >= 2 and raw.startswith(quote) and raw.endswith(quote)
