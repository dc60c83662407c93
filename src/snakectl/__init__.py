"""snakectl -- Real-time input controller for a terminal snake game.

Decouples asynchronous keyboard capture from the periodically ticking
game loop. Raw key codes travel through a single FIFO channel and every
state mutation happens on the loop thread.
"""

__version__ = "0.1.0"
