from terminal_ui.main import run

run()
