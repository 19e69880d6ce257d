"""
Test helpers for applications built on subcommands.

Every dispatch writes through the application's sinks, so tests can run
applications concurrently as long as each test gets its own sinks. These
helpers provide that with unittest:

- ApplicationMock(app): the same application with in-memory out/err buffers
  and a private `log` logger writing to a third buffer.
- CommandTestCase: unittest.TestCase with buffer assertions. On failure it
  dumps the captured STDOUT, STDERR and LOG buffers to standard error.
- disable_log_output(): send root logging to a process buffer.

Example
    class GreetTest(CommandTestCase):
        def testGreet(self):
            app = self.make_app_mock(application)
            self.assertEqual(dispatch(app, ["greet", "bob"]), 0)
            self.check_out(app, "Hi bob!\\n")
"""
import io
import itertools
import logging
import sys
import traceback
import unittest

from .applications import Application

_counter = itertools.count()

_log_buffer = io.StringIO()


def disable_log_output():
    """
    Redirect the root logger to a process-wide buffer and return the buffer.
    """
    root = logging.getLogger()
    for previous in list(root.handlers):
        root.removeHandler(previous)
    handler = logging.StreamHandler(_log_buffer)
    handler.setFormatter(logging.Formatter("%(asctime)s.%(msecs)03d %(message)s", "%H:%M:%S"))
    root.addHandler(handler)
    return _log_buffer


def print_if(text, name, /):
    """
    Print `text` framed by `name` markers to standard error, when not blank.
    """
    if text := text.strip():
        sys.stderr.write("\n\\/ \\/ %s \\/ \\/\n%s\n/\\ /\\ %s /\\ /\\\n" % (name, text, name))


def reduce_stack_trace(lines, /):
    """
    Shorten formatted stack frames to "file:line in function".
    """
    return ["%s:%d in %s" % (frame.filename.rsplit("/", 1)[-1], frame.lineno, frame.name) for frame in lines]


class ApplicationMock(Application):
    """
    Copy of an application whose sinks are StringIO buffers.

    Attributes
    - app: the wrapped application.
    - stdout / stderr: the buffers behind out / err.
    - log_buffer / log: a logger private to this mock and its buffer.
    """

    def __init__(self, app):
        self.app = app
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self.log_buffer = io.StringIO()
        self.log = logging.getLogger("subcommands.testing.mock%d" % next(_counter))
        self.log.propagate = False
        self.log.setLevel(logging.DEBUG)
        self._log_handler = logging.StreamHandler(self.log_buffer)
        self.log.addHandler(self._log_handler)
        super().__init__(app.name, app.title, app.commands, app.env_vars, out=self.stdout, err=self.stderr)

    def __getattr__(self, name):
        # attributes the wrapped application adds on top of Application
        if name == "app":
            raise AttributeError(name)
        return getattr(self.app, name)

    def verbose(self):
        """
        Flush what was logged so far to standard error and log there from now on.
        """
        if text := self.log_buffer.getvalue():
            sys.stderr.write(text)
        self.log.removeHandler(self._log_handler)
        self._log_handler = logging.StreamHandler(sys.stderr)
        self.log.addHandler(self._log_handler)

    def reset(self):
        for buffer in (self.stdout, self.stderr):
            buffer.seek(0)
            buffer.truncate()


class CommandTestCase(unittest.TestCase):
    """
    TestCase with helpers to assert what an ApplicationMock printed.
    """

    def setUp(self):
        super().setUp()
        self._mocks = []

    def make_app_mock(self, app, /):
        mock = ApplicationMock(app)
        self._mocks.append(mock)
        return mock

    def assertf(self, truth, message, *values):
        """
        Fail with `message % values` after dumping every mock's buffers.
        """
        if truth:
            return
        for mock in self._mocks:
            print_if(mock.stdout.getvalue(), "STDOUT")
            print_if(mock.stderr.getvalue(), "STDERR")
            print_if(mock.log_buffer.getvalue(), "LOG")
        sys.stderr.write("\n" + "\n".join(reduce_stack_trace(traceback.extract_stack()[:-1])) + "\n")
        self.fail(message % values if values else message)

    def check_buffer(self, mock, out, err):
        """
        Assert whether output and error buffers hold something, then clear them.
        """
        if out:
            self.assertf(mock.stdout.getvalue() != "", "Expected stdout")
        else:
            self.assertf(mock.stdout.getvalue() == "", "Unexpected stdout")
        if err:
            self.assertf(mock.stderr.getvalue() != "", "Expected stderr")
        else:
            self.assertf(mock.stderr.getvalue() == "", "Unexpected stderr")
        mock.reset()

    def check_out(self, mock, expected):
        """
        Assert the output buffer equals `expected`, then clear it.
        """
        actual = mock.stdout.getvalue()
        self.assertf(expected == actual, "Expected:\n%s\nActual:\n%s", expected, actual)
        mock.stdout.seek(0)
        mock.stdout.truncate()


__all__ = (
    "ApplicationMock",
    "CommandTestCase",
    "disable_log_output",
    "print_if",
    "reduce_stack_trace",
)
