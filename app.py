# app.py
from typing import List, Sequence, Tuple
from absl import app, flags, logging
from ward.patient import Patient
from ward.nurse import Nurse
from ward.view import ConsoleView   # keep for debugging; optional
from ward.conditions import Conditions

DEFAULT_NURSES = ["John Doe", "Jane Doe"]
DEFAULT_CONDITIONS = [Conditions.CRITICAL, Conditions.STABLE]

FLAGS = flags.FLAGS
flags.DEFINE_list("nurses", DEFAULT_NURSES, "Names of the nurses attached to the patient.")
flags.DEFINE_list("conditions", DEFAULT_CONDITIONS, "Conditions applied to the patient, in order.")
flags.DEFINE_bool("quiet", False, "Do not attach the console view.")
flags.register_validator("nurses", lambda names: bool(names), message="--nurses must name at least one nurse.")


def run(nurse_names: Sequence[str],
        conditions: Sequence[str],
        quiet: bool = False) -> Tuple[Patient, List[Nurse]]:
    # Subject
    patient = Patient()

    # Observers
    nurses = [Nurse(name) for name in nurse_names]
    for nurse in nurses:
        patient.attach(nurse)
    if not quiet:
        patient.attach(ConsoleView())

    for condition in conditions:
        patient.change_condition(condition)

    for nurse in nurses:
        logging.info("[APP] %s received %d notifications", nurse.name, len(nurse.notifications))
        for message in nurse.notifications:
            logging.info("[APP]   %s", message)
    return patient, nurses


def main(argv: Sequence[str]) -> None:
    if len(argv) > 1:
        raise app.UsageError("Too many command-line arguments.")
    run(FLAGS.nurses, FLAGS.conditions, quiet=FLAGS.quiet)


if __name__ == "__main__":
    app.run(main)
