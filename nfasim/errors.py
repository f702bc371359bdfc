class AutomatonError(Exception):
  def __init__(self, message: str):
    super(AutomatonError, self).__init__(message)


class NoStartStateError(AutomatonError):
  """
  Raised when an automaton is simulated before a start state was configured.
  """

  def __init__(self, message: str = 'no start state configured'):
    super().__init__(message)


class DefinitionError(AutomatonError):
  """
  A builder call was rejected, e.g. a duplicate state or a transition to an unknown state.
  """

  def __init__(self, what, name, message):
    """
    :param str what: kind of definition, e.g. 'state' or 'transition'
    :param str name: what was being defined
    :param str message:
    """
    self.what = what
    self.name = name
    super().__init__('Cannot define %s %r: %s' % (what, name, message))
