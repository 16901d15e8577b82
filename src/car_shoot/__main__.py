"""Entry point: python -m car_shoot"""

from car_shoot.core.runtime.main_loop import MainLoop


def main():
    MainLoop().run()


if __name__ == "__main__":
    main()
