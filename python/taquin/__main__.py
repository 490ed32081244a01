from taquin.main import app

app(prog_name="taquin")
