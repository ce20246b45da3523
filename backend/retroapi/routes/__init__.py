# Routes package init
"""
Retro Board Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return envelopes.
How:   Each route module handles one resource; handlers stay thin and
       delegate to the services layer.

Route Inventory (🔒 = requires Authorization header):
    root.py:          GET    /                         welcome message
                      GET    /endpoints                registered routes
    health.py:        GET    /health                   service + database status
    users.py:         POST   /signup
                      POST   /signin
                      GET    /users
                      GET    /users/{user_id}          🔒
    retros.py:        POST   /retros                   🔒
                      GET    /retros
                      GET    /retros/{retro_id}
                      PATCH  /retros/{retro_id}        🔒
                      DELETE /retros/{retro_id}        🔒
                      GET    /users/{user_id}/retros
    thoughts.py:      POST   /retros/{retro_id}/thoughts     🔒
                      GET    /retros/{retro_id}/thoughts
                      PATCH  /retros/thoughts/{thought_id}   🔒
                      GET    /thoughts
                      GET    /thoughts/{thought_id}
                      DELETE /thoughts/{thought_id}          🔒
    action_items.py:  POST   /retros/{retro_id}/actionitems  🔒
                      GET    /retros/{retro_id}/actionitems
                      PATCH  /retros/actionitems/{action_id} 🔒
                      GET    /actionitems
                      GET    /actionitems/{action_id}
                      DELETE /actionitems/{action_id}        🔒
"""
