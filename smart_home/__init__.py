"""
Smart Home Simulator Root Module

Layer Structure:
- Domain: Devices, registry, ports and domain services
- Application: Use cases and DTOs
- Infrastructure: In-memory device storage
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, configuration and command line entry point
"""
