from flask_cors import CORS

from fun4kidz.registration.submission import LoggingInterestSubmitter, SimulatedSubmitter

# Singletons (initialized in app factory)
cors = CORS()

SUBMITTER_KEY = "fun4kidz.submitter"
INTEREST_SUBMITTER_KEY = "fun4kidz.interest_submitter"


def init_submitters(app) -> None:
    """Attach the submission collaborators; tests may swap them afterwards."""
    app.extensions[SUBMITTER_KEY] = SimulatedSubmitter(delay_seconds=app.config["SUBMISSION_DELAY_SECONDS"])
    app.extensions[INTEREST_SUBMITTER_KEY] = LoggingInterestSubmitter()


def registration_submitter():
    from flask import current_app

    return current_app.extensions[SUBMITTER_KEY]


def interest_submitter():
    from flask import current_app

    return current_app.extensions[INTEREST_SUBMITTER_KEY]
