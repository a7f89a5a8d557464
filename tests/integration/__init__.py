"""
Integration tests.

These run the real queue and cache clients, transport and JSON bodies end to
end against the in-memory service fake served through httpx.MockTransport:
- Failed-message forwarding (drain, limit, cancellation, isolation)
- Cache-aside get-or-add races
- Concurrent increments

No network access is needed.
"""
