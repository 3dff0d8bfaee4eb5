"""Terminal driver for the Pazaak engine: deck files, prompts and rendering."""
