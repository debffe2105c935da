from .main import app

app(prog_name="utf-core")
