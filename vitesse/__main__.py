from vitesse.application import run

if __name__ == "__main__":
    run()
