"""roslint CLI commands"""
