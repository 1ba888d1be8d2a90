"""This Module provides the Abstract Design Requirements for a State Machine in SimpleTimer"""
from transitions.extensions import GraphMachine


class AbstractStateMachine:
    """This Class provides the Abstract Design Requirements for a State Machine in SimpleTimer"""

    PROGRESS_STATES = []

    IDLE_STATES = []
    COMPLETION_STATES = []
    INITIAL_STATE = None
    STATES = IDLE_STATES + COMPLETION_STATES + PROGRESS_STATES

    TEARDOWN_TRANSITIONS = []

    CORE_TRANSITIONS = []
    TRANSITIONS = CORE_TRANSITIONS + TEARDOWN_TRANSITIONS
    MODEL_ATTRIBUTE = "state"

    @classmethod
    def _state_names(cls, states):
        return [getattr(state, "name", state) for state in states]

    def current_state(self):
        """Returns the name of the state the machine is in"""
        return getattr(self, self.MODEL_ATTRIBUTE, None)

    def is_in_progress(self):
        """
        Returns true if the state machine is currently in a progress state
        """
        return self.current_state() in self._state_names(self.PROGRESS_STATES)

    def is_finished(self):
        """
        Returns true if the state machine is currently in a completion state
        """
        return self.current_state() in self._state_names(self.COMPLETION_STATES)

    @classmethod
    def build_state_graph(cls, filename):
        "Build a graph representation of the state machine and store in 'filename'.png"
        model = type('model', (object,), {})()
        GraphMachine(model=model, states=cls.STATES,
                     title=cls.__name__,
                     transitions=cls.TRANSITIONS,
                     auto_transitions=False,
                     queued=True,
                     initial=cls.INITIAL_STATE)
        # pylint: disable=no-member
        # pytype: disable=attribute-error
        model.get_graph().draw(filename, prog='dot')
