from subcommands import Command

from .common import CommonFlags


class GreetRun(CommonFlags):
    def run(self, app, args, env):
        self.parse(app)
        if len(args) != 1:
            app.err.write("%s: Can only greet one person at a time.\n" % app.name)
            return 1
        self.log.info("Unnecessary logging, use -verbose to see it")
        app.out.write("%s %s!\n" % (env["GREET_STYLE"].value, args[0]))
        return 0


cmd_greet = Command(
    "greet <who>",
    "greets someone",
    "Greets someone. This command has no specific option except the common ones.",
    factory=GreetRun,
)
