from colonybot.agent.machine import AgentStateMachine, DecidePolicy

__all__ = ["AgentStateMachine", "DecidePolicy"]
