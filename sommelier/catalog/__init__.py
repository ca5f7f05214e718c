"""
Static dish and wine catalog.

Responsibilities:
- Describe the catalog document (dishes and wines) as immutable models.
- Locate and parse the JSON catalog, either from an explicit path or by
  probing the legacy locations next to the deployment.
"""
