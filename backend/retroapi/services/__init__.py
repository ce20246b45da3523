# Services package init
"""
Retro Board Backend — Services Layer
=====================================

What:  Business logic between the routes (HTTP) and the database.
How:   Services take an AsyncSession plus validated request schemas, apply
       the resource rules, and return response schemas. They never commit;
       the request's session dependency does.

Service Inventory:
    - UserService: signup, signin, token lookup, user queries
    - RetroService: retro CRUD, admin/participant resolution, per-user listing
    - ThoughtService / ActionItemService: retro-scoped CRUD on a shared base
    - filters: query-string → WHERE clause translation for list routes
    - resolvers: id/username → stored record lookups used before writes
"""
