#
# Operation UI
#
import abc
import sys

from .run_state import RunState, RUN_STATE
from ..lib.util import get_bringup_logger

tlog = get_bringup_logger()


class ops_ui(object, metaclass=abc.ABCMeta):

  @abc.abstractmethod
  def report_tasks(self, runner_id, tasks):
    '''report_tasks is called to explain what the runner is going to do.
       runner_id: unique runner ID - the serial number
    '''
    pass

  @abc.abstractmethod
  def report_task_progress(self, runner_id, task, tasks):
    pass

  @abc.abstractmethod
  def report_task_failure(self, runner_id, task):
    pass

  @abc.abstractmethod
  def report_task_success(self, runner_id, task):
    pass

  @abc.abstractmethod
  def report_run_progress(self, runner_id, runner_state, step, tasks):
    ''' reports running progress.
 runner_state is a enum of RunState
'''
    pass

  # message be printed and shown somewhere.
  @abc.abstractmethod
  def log(self, runner_id, msg):
    pass
  pass


class console_ui(ops_ui):
  def __init__(self, output=None, error_output=None):
    self.output = output if output else sys.stdout
    self.error_output = error_output if error_output else sys.stderr
    pass

  def report_tasks(self, runner_id, tasks):
    index = 0
    for task in tasks:
      index = index + 1
      print("%s %d: %s - %s" % (runner_id, index, task.description, task.explain()), file=self.output)
      pass
    pass

  def report_task_progress(self, runner_id, task, tasks):
    print("Running step %d of %d: %s..." % (task.task_number+1, len(tasks), task.description), file=self.output)
    pass

  def report_task_failure(self, runner_id, task):
    print("Error: %s %s" % (task.description, task.message), file=self.error_output)
    tlog.error("%s %s failed: %s" % (runner_id, task.description, task.message))
    pass

  def report_task_success(self, runner_id, task):
    print("%s: %s" % (task.description, task.message), file=self.output)
    tlog.info("%s %s finished in %.1f seconds." % (runner_id, task.description, task.elapsed_time()))
    pass

  def report_run_progress(self, runner_id, runner_state, step, tasks):
    if runner_state in [RunState.Success, RunState.Failed]:
      print("%s %s (%d/%d)" % (runner_id, RUN_STATE[runner_state.value], step, len(tasks)), file=self.output)
      pass
    pass

  def log(self, runner_id, msg):
    print(runner_id + ": " + msg, file=self.output)
    pass

  pass


class virtual_ui(ops_ui):
  def __init__(self):
    self.state = RunState.Initial
    self.failed_task = None
    self.succeeded = []
    self.messages = []
    pass

  def report_tasks(self, runner_id, tasks):
    pass

  def report_task_progress(self, runner_id, task, tasks):
    pass

  def report_task_failure(self, runner_id, task):
    self.state = RunState.Failed
    self.failed_task = task
    pass

  def report_task_success(self, runner_id, task):
    self.succeeded.append(task)
    pass

  def report_run_progress(self, runner_id, runner_state, step, tasks):
    self.state = runner_state
    pass

  def log(self, runner_id, msg):
    self.messages.append(msg)
    pass

  pass
