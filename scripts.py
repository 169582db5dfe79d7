import subprocess
import sys

def run_tests():
    subprocess.run(["pytest"], check=True)

def run_cli_tests():
    subprocess.run(["pytest", "--run-cli-tests", "tests/integration"], check=True)

def run_doctests():
    subprocess.run(["pytest", "--doctest-modules", "src/mddir"], check=True)

def run_lint():
    subprocess.run(["flake8", "--max-line-length", "120", "src", "tests"], check=True)

def run_typecheck():
    subprocess.run(["mypy", "src"], check=True)

def run_format():
    subprocess.run(["black", "src", "tests"], check=True)

def run_coverage():
    subprocess.run(["pytest", "--run-cli-tests", "--cov=mddir", "--cov-report=term-missing", "--cov-report=xml"], check=True)

def run_all():
    for step in (run_lint, run_typecheck, run_doctests, run_tests):
        step()

if __name__ == "__main__":
    globals()[sys.argv[1]]()
