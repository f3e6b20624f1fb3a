#
# Tasks: each task is one step of the bring-up that has a side effect.
#
# The runner creates the plan - which is the sequence of tasks - and runs
# through it. A task that fails stops the run.
#
import abc, datetime

from ..lib.netplan import save_network_config
from ..lib.util import get_bringup_logger, in_seconds

tlog = get_bringup_logger()


class op_task(object, metaclass=abc.ABCMeta):
  def __init__(self, description, **kwargs):
    if not isinstance(description, str):
      raise Exception("Description must be a string")
    self.kwargs = kwargs
    self.task_number = None # Runner assigns this. It's an ID for the task in the runner
    self.description = description
    self.progress = 0
    self.message = None # Progress message
    self.start_time = None
    self.end_time = None
    pass

  def preflight(self, tasks):
    """preflight is called from runner's preflight. you get to know
       other tasks."""
    pass

  def setup(self):
    """setup is called at the beginning of running."""
    self.start_time = datetime.datetime.now()
    pass

  def teardown(self):
    """teardown is called just after the run"""
    self.end_time = datetime.datetime.now()
    pass

  def elapsed_time(self):
    if self.start_time is None or self.end_time is None:
      return 0
    return in_seconds(self.end_time - self.start_time)

  @abc.abstractmethod
  def poll(self):
    """poll is called while the execution is going on"""
    pass

  @abc.abstractmethod
  def explain(self):
    pass

  def set_progress(self, progress, msg):
    self.progress = progress
    if msg:
      self.message = msg
      pass
    pass

  def fail(self, msg):
    self.set_progress(999, msg)
    self.teardown()
    pass

  pass


# Base class for simple Python
class op_task_python_simple(op_task):
  def __init__(self, description, **kwargs):
    super().__init__(description, **kwargs)
    pass

  def poll(self):
    self.run_python()
    self.set_progress(100, self.kwargs.get('progress_finished', "finished."))
    pass

  @abc.abstractmethod
  def run_python(self):
    pass

  def explain(self):
    return "Run " + self.description
  pass


#
# Writes the netplan file.
#
class task_save_netplan(op_task_python_simple):

  def __init__(self, description, config_path, content, **kwargs):
    """
    :param description: description of operation
    :param config_path: netplan file path. Overwritten.
    :param content: netplan yaml
    """
    super().__init__(description, **kwargs)
    self.config_path = config_path
    self.content = content
    pass

  def run_python(self):
    save_network_config(self.config_path, self.content)
    pass

  def explain(self):
    return "Write " + self.config_path
  pass


#
# Runs a command through a collaborator that knows the command line.
# call is the bound method to run and argv is only for explaining.
#
class task_command(op_task_python_simple):

  def __init__(self, description, call, args=(), argv=None, **kwargs):
    super().__init__(description, **kwargs)
    self.call = call
    self.args = args
    self.argv = argv
    pass

  def run_python(self):
    self.call(*self.args)
    pass

  def explain(self):
    if self.argv is None:
      return "Run " + self.description
    return "Execute " + " ".join([str(arg) for arg in self.argv])
  pass
