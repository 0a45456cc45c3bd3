from script_gate.server import run

run()
