"""Domain layer (pure logic).

- Discount rules, domain models and the error taxonomy live here.
- No I/O: no file access, no HTTP/FastAPI.
"""
