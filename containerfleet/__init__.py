"""
Container Fleet: Cargo Container & Ship Loading Model
=====================================================
Hexagonal (Ports & Adapters) architecture.

Layer map
─────────────────────────────────────────────────────
  config/       All tuneable settings (env / .env driven)
  domain/       Containers, ships, value objects, exceptions, no I/O
  ports/        Abstract interfaces (Python Protocols)
  adapters/     Concrete implementations of each Port (serials, notifier)
  services/     Wiring of the process-wide default adapters
  interfaces/   Delivery layer: CLI demo
  tests/        Full test suite: unit / e2e

Swapping the serial number source or the hazard notification channel:
  1. Write a new adapter in adapters/ implementing the relevant Port
  2. Change the single wiring line in services/wiring.py
     (or pass the adapter explicitly when constructing a container)
"""
__version__ = "1.0.0"
