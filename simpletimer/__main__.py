import logging
import sys
import argparse

from simpletimer import context
from simpletimer.simple_timer import SimpleTimer
from simpletimer.task_scheduler import TaskScheduler
from simpletimer.utils import ContextError, TimerConfigError


def get_logger(name, log_level=logging.DEBUG):
    """Create and return a logger object"""

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(log_level)
        logger_handler = logging.StreamHandler(sys.stdout)
        logger_handler.setLevel(log_level)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        logger_handler.setFormatter(formatter)
        logger.addHandler(logger_handler)
    return logger


def parse_args(argv=None):
    """Parse command line arguments"""

    parser = argparse.ArgumentParser(
        description='Run a single SimpleTimer countdown and log its notifications')

    parser.add_argument(
        '-n',
        '--name',
        dest='name',
        help='Set the name the timer is registered under - Default: countdown',
        default='countdown')
    parser.add_argument(
        '-d',
        '--duration',
        dest='duration',
        type=float,
        help='Set the countdown length in time units - Default: 10',
        default=10)
    parser.add_argument(
        '-t',
        '--tick',
        dest='tick',
        type=float,
        help='Set the time units between ticks - Default: 1',
        default=1)
    parser.add_argument(
        '-k',
        '--keep',
        dest='keep',
        action='store_true',
        help='Keep the timer registered after it completes')
    parser.add_argument(
        '-r',
        '--role',
        dest='role',
        choices=context.ROLES,
        help='Set the execution context of this process - Default: server',
        default=context.SERVER)
    parser.add_argument(
        '-u',
        '--time-unit',
        dest='time_unit',
        type=float,
        help='Set the number of seconds in one time unit - Default: 1',
        default=1.0)
    return parser.parse_args(argv)


def main(argv=None):
    """SimpleTimer main function, run one countdown to completion"""

    args = parse_args(argv)

    logger = get_logger("SIMPLETIMER")
    logger.info('Starting SimpleTimer...')

    service = SimpleTimer(logger,
                          task_scheduler=TaskScheduler(logger, time_unit=args.time_unit),
                          context_check=context.context_for_role(args.role))
    try:
        timer = service.create_timer(args.name, args.duration, args.tick,
                                     auto_destroy=not args.keep)
    except (ContextError, TimerConfigError) as exception:
        logger.error("Unable to create timer %s: %s", args.name, exception)
        return 1

    timer.on_tick.connect(
        lambda remaining_time: logger.info("%s: %s remaining", timer.name, remaining_time))
    timer.on_status_changed.connect(
        lambda: logger.info("%s: status %s", timer.name, timer.status))
    timer.on_completed.connect(
        lambda: logger.info("%s: completed", timer.name))

    timer.start()
    service.wait()
    logger.info("registered timers: %s", service.registry.names())
    return 0


if __name__ == '__main__':
    sys.exit(main())
