"""
CLI de unitsync (typer + rich).
"""
