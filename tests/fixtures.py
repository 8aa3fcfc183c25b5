"""
Test fixtures for astgraph.

This module provides sample Python code used across the extraction,
search and CLI tests.
"""

ONLY_MAIN = '''
def main():
    pass
'''

MAIN_AND_PRINT = '''
import sys

def main():
    sys.exit("Hello, World!")
'''

TWO_FUNCTIONS = '''
def main():
    printMore("Hello")

def printMore(msg):
    println(msg)
'''

VARIABLE_DECLARATION_AND_USE = '''
def main():
    x: int
    x = 5
    print(x)
'''

VARIABLE_PASSED_TO_FUNCTION = '''
def main():
    message: str = "hello"
    say(message)

def say(msg):
    print(msg)
'''

GLOBAL_VARIABLE = '''
counter: int = 0

def main():
    global counter
    counter = 10
    print(counter)
'''

MODULE_LEVEL_DECLARATION = '''
x: int
'''

RETURN_VALUE = '''
def get_string():
    return "Hello, World!"

def main():
    text = get_string()
    print(text)
'''

FIRST_ASSIGNMENT_DECLARES = '''
def main():
    total = 0
    total = total + 1
    first, second = split()
'''

SAME_NAME_IN_TWO_FUNCTIONS = '''
def first():
    x = 1
    use(x)

def second():
    x = 2
    use(x)
'''

NESTED_FUNCTION_REBINDS = '''
def outer():
    x = 1
    def inner():
        x = 2
    x = 3
'''

LOOP_AND_WITH_BINDINGS = '''
def main():
    for item in items():
        show(item)
    with open_log() as log:
        log.write("done")
'''

EXCEPT_AND_WALRUS_BINDINGS = '''
def main():
    try:
        run()
    except ValueError as error:
        report(error)
    if (count := total()) > 1:
        show(count)
'''

NESTED_SELECTOR_CALL = '''
import os

def main():
    os.path.join("a", "b")
'''

CALL_RESULT_CALL = '''
def main():
    make()()
'''

SUBSCRIPT_CALL = '''
def main():
    handlers[0]()
'''

SYNTAX_ERROR = "def broken("
