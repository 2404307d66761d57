"""
Static Analysis Package.

This package contains the rules that inspect symbol information of compiled
web projects and report misconfigurations.

Modules:
    - ``classifier``: Maps interface names onto ASP.NET technology families.
    - ``controller``: Detects MVC/WebApi attributes applied to controllers of the other stack.
    - ``descriptor``: Static rule metadata (id, message template, severity).
    - ``findings``: Finding and diagnostic records produced by the rules.
"""
