# app.py
from absl import app, flags
from absl import logging as absl_logging

from mvc.model import BaggageHandler
from mvc.view import ArrivalsMonitor
from mvc.controller import BaggageFeedController
from sinks.base import ISink
from sinks.console import ConsoleSink
from sinks.log import LogSink

CLAIM_MONITOR = "BaggageClaimMonitor"
EXIT_MONITOR = "SecurityExit"
DEFAULT_SINK = "console"

FLAGS = flags.FLAGS
flags.DEFINE_list("monitors", [CLAIM_MONITOR, EXIT_MONITOR],
                  "Names of the two arrivals monitors (claim area, security exit).")
flags.DEFINE_enum("sink", DEFAULT_SINK, ["console", "log"],
                  "Where monitors render their arrivals board.")


def make_sink(kind: str) -> ISink:
    if kind == "log":
        return LogSink()
    return ConsoleSink()


def run_walkthrough(sink: ISink,
                    claim_name: str = CLAIM_MONITOR,
                    exit_name: str = EXIT_MONITOR) -> BaggageHandler:
    """Replays a day of arrivals with one monitor joining late and leaving early."""
    # Model
    provider = BaggageHandler()

    # Views (Observers)
    claim_monitor = ArrivalsMonitor(claim_name, sink=sink)
    exit_monitor = ArrivalsMonitor(exit_name, sink=sink)

    # Controller
    ctrl = BaggageFeedController(provider)

    ctrl.apply((712, "Detroit", 3))
    claim_monitor.attach(provider)
    ctrl.run([
        (712, "Kalamazoo", 3),
        (400, "New York-Kennedy", 1),
        (712, "Detroit", 3),
    ])
    exit_monitor.attach(provider)
    ctrl.apply((511, "San Francisco", 2))
    provider.update_by_flight_number(712)
    exit_monitor.detach()
    provider.update_by_flight_number(400)
    ctrl.finish()
    return provider


def main(argv):
    del argv  # unused
    if len(FLAGS.monitors) != 2:
        raise app.UsageError("--monitors takes exactly two names")
    claim_name, exit_name = FLAGS.monitors
    absl_logging.info("[APP] Starting arrivals walkthrough…")
    provider = run_walkthrough(make_sink(FLAGS.sink), claim_name, exit_name)
    absl_logging.info("[APP] Done, %d flights still on carousels.", len(provider.flights()))


def run():
    app.run(main)


if __name__ == "__main__":
    run()
