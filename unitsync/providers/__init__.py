"""
Providers: implementaciones reales de las capacidades del core.
"""
