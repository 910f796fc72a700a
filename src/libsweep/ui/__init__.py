"""Terminal surface: prompts, report rendering and the CLI entry point."""
