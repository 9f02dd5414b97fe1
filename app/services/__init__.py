"""서비스 패키지 — 스키마 변환 계층.

Service package — Converts between API schemas and repository rows.
"""
