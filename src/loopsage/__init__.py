"""LoopSage: flags DML statements and SOQL queries executed inside loops."""
