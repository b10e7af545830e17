"""
Fire Alarm monitor - run directly on the Raspberry Pi with `python main.py`
"""

from fire_alarm.main import run

if __name__ == "__main__":
    run()
