"""HTTP surface for Gadget.

- app.py              - application factory
- deps.py             - shared request dependencies and templates
- routes/pages.py     - server-rendered admin (Jinja2)
- routes/redirects.py - JSON API under /_gadget/api
- routes/ui.py        - SPA shell under /_gadget/ui/
- routes/resolve.py   - redirect resolution catch-all
"""
