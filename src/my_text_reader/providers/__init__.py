"""
Speech back ends: the in-process engine and the system voice command.
"""
