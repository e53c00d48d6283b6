"""
Camp Registration API

Layers, inner to outer:
- domain: health statuses, check results, reduction rules and ports
- application: the health use case and its response DTOs
- infrastructure: probes, deadline wrapper, database, payment gateways
- presentation: the FastAPI ``/health`` router
- shared: logging, secret files and enums
- main: settings, dependency container and server entry point
"""
