import time

from subcommands import Command

from .common import CommonFlags


class SleepRun(CommonFlags):
    duration = 1.0

    def __init__(self):
        super().__init__()
        self.flags.flag("duration", 1.0, "Duration of the sleep, in `seconds`")

    def run(self, app, args, env):
        self.parse(app)
        if args:
            app.err.write("%s: Unsupported arguments.\n" % app.name)
            return 1
        if self.duration <= 0:
            app.err.write("%s: -duration is required.\n" % app.name)
            return 1

        app.out.write("Sleeping for %gs.\n" % self.duration)
        dreams = env["VERBOSE_DREAMS"].value == "1"
        remaining = self.duration
        while remaining > 0:
            step = min(remaining, 0.1)
            time.sleep(step)
            remaining -= step
            if dreams:
                app.out.write("dreaming of sheep\n")
        self.log.info("Done sleeping for %gs.", self.duration)
        return 0


cmd_sleep = Command(
    "sleep <options>",
    "sleeps for some time",
    "Sleeps for some time, as desired.",
    factory=SleepRun,
)
