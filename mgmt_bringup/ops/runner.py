#
# Runner runs the tasks in order.
#
# prepare creates the plan - which is the sequence of tasks.
# run goes through the tasks and stops at the first failure.
# Nothing is undone.
#
import traceback

from .run_state import RunState, RUN_STATE
from ..errors import BringupError
from ..lib.util import get_bringup_logger

tlog = get_bringup_logger()

#
# Base class for runner
#
class Runner:

  def __init__(self, ui, runner_id):
    self.state = RunState.Initial
    self.ui = ui
    self.runner_id = runner_id
    self.tasks = []
    self.task_step = None
    pass

  def prepare(self):
    '''prepare is for runner's preparation, not for tasks. during prepare,
       runner should create tasks.'''
    if self.state != RunState.Initial:
      raise Exception("Run state is not initial")
    self.state = RunState.Prepare
    self.task_step = 0
    pass

  def preflight(self):
    '''preflight is for tasks's preparation, not for runner.'''
    if self.state != RunState.Prepare:
      raise Exception("Run state is not Prepare")

    self.state = RunState.Preflight

    task_number = 0
    for task in self.tasks:
      task.task_number = task_number
      task_number += 1
      pass

    # This gives a chance for tasks to know the neighbors.
    for task in self.tasks:
      task.preflight(self.tasks)
      pass
    pass

  # Explaining what's going to happen
  def explain(self):
    self.ui.report_tasks(self.runner_id, self.tasks)
    pass

  def report_run_state(self):
    self.ui.report_run_progress(self.runner_id, self.state, self.task_step, self.tasks)
    pass

  def get_run_state_name(self):
    return RUN_STATE[self.state.value]

  #
  def run(self):
    if self.state != RunState.Preflight:
      raise Exception("Run state is not Preflight")
    self.state = RunState.Running

    while self.task_step < len(self.tasks):
      self.report_run_state()
      task = self.tasks[self.task_step]

      try:
        self._run_task(task, self.ui)
      except BringupError as exc:
        self.state = RunState.Failed
        task.fail(str(exc))
        self.ui.report_task_failure(self.runner_id, task)
      except Exception as exc:
        self.state = RunState.Failed
        tb = traceback.format_exc()
        tlog.error("Task: " + task.description + "\n" + tb)
        task.fail('Task failed due to internal error. See logging. ' + str(exc))
        self.ui.report_task_failure(self.runner_id, task)
        pass

      if self.state == RunState.Failed:
        break
      self.task_step = self.task_step + 1
      pass

    if self.state == RunState.Running:
      self.state = RunState.Success
      pass
    self.report_run_state()
    return self.state == RunState.Success


  def _run_task(self, task, ui):
    task.setup()
    ui.report_task_progress(self.runner_id, task, self.tasks)

    while task.progress < 100:
      task.poll()
      pass

    task.teardown()
    ui.report_task_success(self.runner_id, task)
    pass

  pass
