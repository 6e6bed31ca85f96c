"""
Auth Service package for the Bank App.

Exposes the FastAPI application for registering clients, logging the single
session in and out, and injecting artificial latency per operation:

- app.main: Application entrypoint that wires routes and lifecycle.
- app.gateway: Sequences delay, client store call, session update, metrics.
- app.timeouts: Per-operation artificial delay registry.
- app.session: The process-wide logged-in slot.
- app.metrics: Prometheus counters, timers and delay gauges.
- app.clients: In-memory client store collaborator.

Design notes:
- Keep the package import side-effects minimal; all state is created per
  AuthService instance, never at module level.
- Use the shared/ utilities for logging, metrics, config, and errors.
- All state is in memory and resets on restart.
"""
