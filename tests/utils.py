DEPLOYMENTS_TABLE = """
+------------+-------------+-------------------------------+
| Name       | Release(s)  | Stemcell(s)                   |
+------------+-------------+-------------------------------+
| foo-z1     | foo/1       | stemcell-trusty-go_agent/1234 |
+------------+-------------+-------------------------------+

Deployments total: 1
"""

EMPTY_TABLE = """
+------+------------+-------------+
| Name | Release(s) | Stemcell(s) |
+------+------------+-------------+
+------+------------+-------------+

Deployments total: 0
"""


def commands(shell) -> list[str]:
    """The command lines a mocked Shell was asked to run, in order."""
    return [c.args[0] for c in shell.run.call_args_list]
