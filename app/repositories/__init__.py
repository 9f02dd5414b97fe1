"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Each repository extends SqlRepository and runs parameterized SQL
(``$1 .. $n`` placeholders with a parallel value list) through
``app.database.execute_query``.
"""
