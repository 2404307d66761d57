"""
Reporting Package.

Diagnostic sinks that receive findings from the analyzers and present them.
"""
