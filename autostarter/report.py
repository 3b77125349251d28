# -*- coding: utf-8 -*-
"""Autostarter: Human-readable reports

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

Each function returns a list of lines; printing them is up to the caller.

"""
from .sequencer import LaunchState
from .utils.humanize import duration, pl
from .xdg.autostart import SkipReason


RULE = '=' * 40

SKIP_LABELS = {
        SkipReason.FileUnreadable: "unreadable",
        SkipReason.NotAnApplication: "not an application",
        SkipReason.Hidden: "hidden/no-display",
        SkipReason.PolicyDenied: "disallowed by config",
        SkipReason.ExecutableMissing: "TryExec not found",
        }


def describeConfig(config):
    lines = [
            "=== Current Config " + '=' * 21,
            "Startup delay: {}".format(duration(config.startupDelayMs)),
            "Delay between apps: {}".format(duration(config.interItemDelayMs)),
            "Log level: {}".format(config.logLevel or "default"),
            "Log file: {}".format(config.logFile or "none"),
            "",
            "Application rules ({}):".format(len(config.appRules)),
            ]

    for rule in config.appRules:
        line = "  - {}: {}".format(rule.name, "ALLOW" if rule.allow else "BLOCK")
        if rule.hasDelayOverride:
            line += ", delay: {}".format(duration(rule.delayOverrideMs))
        lines.append(line)

    lines.append("")
    lines.append("Directory rules ({}):".format(len(config.dirRules)))
    lines.extend("  - {}: {}".format(rule.path, "ALLOW" if rule.allow else "BLOCK") for rule in config.dirRules)

    lines.append(RULE)
    return lines


def describeDirectory(summary, index):
    header = "[Directory {}] {}".format(index + 1, summary.path)

    if not summary.exists:
        return [header, "  Directory does not exist or can't be read."]

    if summary.blocked:
        return [header, "  Blocked by config."]

    lines = [header]
    for skipped in summary.skipped:
        if skipped.reason is not SkipReason.NotAnApplication:
            lines.append("  Skipped ({}): {}".format(SKIP_LABELS[skipped.reason], skipped.name or skipped.filename))

    lines.extend("  Queued: {}".format(entry.name) for entry in summary.queued)

    lines.extend([
            "  Total .desktop files found: {}".format(summary.found),
            "  Queued for launch: {}".format(len(summary.queued)),
            "  Skipped: {}".format(len(summary.skipped)),
            ])
    return lines


def describeOutcome(outcome, total):
    if outcome.state is LaunchState.Launched:
        status = "Launched"
    elif outcome.state is LaunchState.LaunchFailed:
        status = "FAILED"
    else:
        status = str(outcome.state)

    line = "[{}/{}] {}: {}".format(outcome.index + 1, total, status, outcome.entry.name)
    if outcome.error is not None:
        line += " ({})".format(outcome.error)
    return line


def describeLaunch(report):
    if report.total == 0:
        return ["No applications to launch."]

    return [
            RULE,
            "Launch completed: {}".format(pl(report.total, "application")),
            "Successful: {}".format(report.succeeded),
            "Failed:     {}".format(report.failed),
            ]
