"""
Core domain models, lexical grammars, and numeric domains.

Independent of any serialization format or term/graph model.
"""
