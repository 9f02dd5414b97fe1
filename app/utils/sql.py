"""동적 SQL 조각 빌더 — 부분 업데이트 SET 절과 필터 WHERE 절 생성.

Dynamic SQL fragment builder for partial-update ``SET`` clauses and
filter ``WHERE`` clauses.

Values are never interpolated into SQL text: every fragment carries
``$n`` placeholders and a parallel list of bind values, where ``$n`` is the
value's 1-based position in the final bind list sent to the store. Column
names only come from code-controlled tables (translation tables and
``FilterRule`` definitions), never from request data.

Usage:
    fragment = build_set_fragment({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
    # fragment.clause == 'first_name = $1, age = $2'
    # fragment.values == ['Aliya', 32]
    sql = f"UPDATE users SET {fragment.clause} WHERE id = {next_placeholder(fragment.values)}"
    rows = await execute_query(db, sql, [*fragment.values, user_id])
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from app.utils.exceptions import BadRequestError


@dataclass(frozen=True)
class SqlFragment:
    """SQL 조각과 바인드 값 — clause text plus its ordered bind values.

    Attributes:
        clause: 플레이스홀더를 포함한 SQL 텍스트, 비어 있을 수 있음
                (SQL text with placeholders; may be empty)
        values: ``$n`` 순서와 1:1로 대응하는 값 목록
                (Bind values matching the placeholders one-to-one)
    """

    clause: str
    values: list[Any] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.clause)


@dataclass(frozen=True)
class FilterRule:
    """인식되는 필터 키 하나에 대한 술어 정의.

    Predicate definition for one recognised filter key.

    A rule with an ``operator`` emits ``"<expression> <operator> $n<suffix>"`` and binds
    the (optionally transformed) value; ``None`` and ``""`` are treated as not
    supplied. A rule without an ``operator`` is a presence predicate: its
    ``expression`` is emitted verbatim when the supplied value is truthy and
    binds nothing.

    Attributes:
        key: 외부 필터 키 (External filter key, e.g. ``minSalary``)
        expression: 컬럼 또는 SQL 식 (Column or SQL expression)
        operator: 비교 연산자, None이면 리터럴 술어 (Comparison operator; None for literal predicates)
        transform: 바인딩 전 값 변환 함수 (Value transform applied before binding)
        suffix: 플레이스홀더 뒤에 붙는 SQL (SQL appended after the placeholder, e.g. ``ESCAPE``)
    """

    key: str
    expression: str
    operator: str | None = None
    transform: Callable[[Any], Any] | None = None
    suffix: str = ""


def resolve_column(name: str, column_names: Mapping[str, str] | None = None) -> str:
    """외부 필드명을 컬럼명으로 변환합니다. 표에 없으면 그대로 반환.

    Translate an external field name to its column name; names absent
    from the table pass through unchanged.
    """
    if not column_names:
        return name
    return column_names.get(name, name)


LIKE_ESCAPE: str = " ESCAPE '\\'"


def contains_pattern(text: str) -> str:
    """부분 일치 LIKE 패턴 — lowercase substring pattern with wildcards escaped.

    ``%`` and ``_`` in ``text`` match literally; use with ``LIKE_ESCAPE``.
    """
    escaped = text.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def next_placeholder(values: Sequence[Any]) -> str:
    """다음 플레이스홀더 — placeholder for a value appended after ``values``."""
    return f"${len(values) + 1}"


def build_set_fragment(
    data: Mapping[str, Any],
    column_names: Mapping[str, str] | None = None,
    start: int = 1,
) -> SqlFragment:
    """부분 업데이트용 SET 절을 생성합니다.

    Build the ``SET`` clause for a partial update.

    Keys are emitted in insertion order; the k-th key becomes
    ``"<column> = $<start + k - 1>"`` and its value is the k-th bind value.
    Callers appending more values (e.g. the row id) must place them after
    ``fragment.values`` and number them from ``len(fragment.values) + start``.

    Args:
        data: 변경할 필드와 값 (Fields to change mapped to new values; must be non-empty)
        column_names: 외부 필드명 → 컬럼명 변환표 (External name → column name table)
        start: 첫 플레이스홀더 번호 (Index of the first placeholder)

    Returns:
        SqlFragment: ``", "``로 연결된 할당 목록과 값 (Comma-joined assignments and values)

    Raises:
        BadRequestError: data가 비어 있음 (``data`` is empty)
    """
    if not data:
        raise BadRequestError("No data")

    assignments: list[str] = []
    values: list[Any] = []
    for index, (name, value) in enumerate(data.items(), start=start):
        assignments.append(f"{resolve_column(name, column_names)} = ${index}")
        values.append(value)

    return SqlFragment(", ".join(assignments), values)


def build_filter_fragment(
    filters: Mapping[str, Any] | None,
    rules: Sequence[FilterRule],
    start: int = 1,
) -> SqlFragment:
    """필터 명세로부터 WHERE 술어 목록을 생성합니다.

    Build the predicate list for a filtered read.

    Predicates follow the order of ``rules``, not the caller's key order, so
    placeholder numbering is fixed by the schema. Keys without a rule are
    ignored. An empty fragment means no filtering; the caller must then omit
    ``WHERE`` entirely.

    Args:
        filters: 필터 명세, None이면 필터 없음 (Filter specification; None means no filtering)
        rules: 인식되는 키의 고정 순서 규칙 (Recognised keys in their fixed emission order)
        start: 첫 플레이스홀더 번호 (Index of the first placeholder)

    Returns:
        SqlFragment: ``" AND "``로 연결된 술어와 값 (AND-joined predicates and values)
    """
    if not filters:
        return SqlFragment("")

    predicates: list[str] = []
    values: list[Any] = []
    for rule in rules:
        value = filters.get(rule.key)
        if rule.operator is None:
            if value:
                predicates.append(rule.expression)
            continue
        if value is None or value == "":
            continue
        if rule.transform is not None:
            value = rule.transform(value)
        values.append(value)
        placeholder = f"${start + len(values) - 1}"
        predicates.append(f"{rule.expression} {rule.operator} {placeholder}{rule.suffix}")

    return SqlFragment(" AND ".join(predicates), values)
