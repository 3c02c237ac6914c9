"""Core snap orchestration, configuration paths and theming."""
