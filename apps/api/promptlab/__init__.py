"""Framework prompt generator: turns a task description into a TCREI/CLEAR structured LLM prompt."""
