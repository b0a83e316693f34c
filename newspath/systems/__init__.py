from newspath.systems.nntp import Nntp
