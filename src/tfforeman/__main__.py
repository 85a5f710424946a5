from tfforeman.cli import run

run()
