""" Invoke tasks. """
import sys
import io
from invoke.tasks import task

if isinstance(sys.stdout, io.TextIOWrapper):
    sys.stdout.reconfigure(encoding='utf-8')


@task
def install(c):
    c.run('pip install -e ".[test]"')


@task
def back(c):
    c.run("uvicorn app:app --reload --host 127.0.0.1 --port 8001")


@task
def demo(c, show_beds=False):
    env = {"PYTHONUTF8": "1"}
    if show_beds:
        env["SHOW_BEDS"] = "1"
    c.run("python main.py", env=env)


@task
def test(c):
    c.run("pytest -q")
